from mincyclebasis.gf2 import GF2Basis, bits


def test_bits():
    assert list(bits(0)) == []
    assert list(bits(0b101001)) == [0, 3, 5]


def test_add_independent():
    basis = GF2Basis()
    assert basis.add(0b0011)
    assert basis.add(0b0110)
    assert not basis.add(0b0101)    # sum of the first two
    assert basis.add(0b1000)
    assert len(basis) == 3


def test_zero_is_dependent():
    basis = GF2Basis()
    assert not basis.add(0)
    assert len(basis) == 0


def test_decompose():
    basis = GF2Basis()
    vectors = [0b00111, 0b01100, 0b11000]
    for v in vectors:
        assert basis.add(v)

    assert basis.decompose(0b00111 ^ 0b11000) == 0b101
    assert basis.decompose(0b00111 ^ 0b01100 ^ 0b11000) == 0b111
    assert basis.decompose(0b01100) == 0b010
    assert basis.decompose(0) == 0
    assert basis.decompose(0b00001) is None


def test_decompose_matches_sum():
    basis = GF2Basis()
    vectors = [0b110001, 0b011010, 0b000111, 0b101100]
    added = [v for v in vectors if basis.add(v)]
    target = added[0] ^ added[2]
    combo = basis.decompose(target)
    total = 0
    for k in bits(combo):
        total ^= added[k]
    assert total == target
