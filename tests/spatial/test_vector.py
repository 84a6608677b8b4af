"""Tests for the Vec2 and Vec2u types in the spatial package."""

import pytest

from tilegrid.spatial.vector import Vec2, Vec2u


class TestVec2:
    """Tests for the signed vector."""

    def test_arithmetic(self):
        """Test component-wise addition, subtraction and scalar multiplication."""
        a = Vec2(1, -2)
        b = Vec2(3, 5)
        assert a + b == Vec2(4, 3)
        assert a - b == Vec2(-2, -7)
        assert a * 3 == Vec2(3, -6)
        assert 3 * a == Vec2(3, -6)

    def test_negation(self):
        """Test negation flips both components."""
        assert -Vec2(2, -3) == Vec2(-2, 3)
        assert -Vec2.ZERO == Vec2.ZERO

    def test_operations_return_new_instances(self):
        """Test vectors are immutable values."""
        a = Vec2(1, 1)
        b = a + Vec2.X
        assert a == Vec2(1, 1)
        assert b == Vec2(2, 1)
        with pytest.raises(AttributeError):
            a.x = 5

    def test_euclidean_modulo(self):
        """Test modulo keeps components in [0, divisor) for negative dividends."""
        assert Vec2(-1, 5) % Vec2(3, 3) == Vec2(2, 2)
        assert Vec2(-7, -3) % Vec2(4, 3) == Vec2(1, 0)
        assert Vec2(7, 4) % Vec2(-3, -3) == Vec2(1, 1)

    def test_modulo_by_zero(self):
        """Test modulo by a zero component raises."""
        with pytest.raises(ZeroDivisionError):
            Vec2(1, 1) % Vec2.X

    def test_mixed_types_not_supported(self):
        """Test signed and unsigned vectors do not mix in arithmetic."""
        with pytest.raises(TypeError):
            Vec2(1, 1) + Vec2u(1, 1)
        with pytest.raises(TypeError):
            Vec2(1, 1) * 1.5

    def test_unsign(self):
        """Test unsign succeeds only for non-negative components."""
        assert Vec2(3, 0).unsign() == Vec2u(3, 0)
        assert Vec2(-1, 0).unsign() is None
        assert Vec2(0, -1).unsign() is None

    def test_cardinal(self):
        """Test cardinal directions are up, right, down, left."""
        assert Vec2.cardinal() == (Vec2(0, -1), Vec2(1, 0), Vec2(0, 1), Vec2(-1, 0))

    def test_constants(self):
        """Test the named unit and zero vectors."""
        assert Vec2.X == Vec2(1, 0)
        assert Vec2.Y == Vec2(0, 1)
        assert Vec2.ZERO == Vec2(0, 0)

    def test_as_str(self):
        """Test the glyph mapping for special vectors and the fallback."""
        assert Vec2.ZERO.as_str() == "o"
        assert [d.as_str() for d in Vec2.cardinal()] == ["^", ">", "v", "<"]
        assert Vec2(1, 1).as_str() == "*"
        assert Vec2(0, 2).as_str() == "*"
        assert str(Vec2(-1, 0)) == "<"

    def test_hashable(self):
        """Test vectors can be used as dict keys and in sets."""
        assert len({Vec2(1, 2), Vec2(1, 2), Vec2(2, 1)}) == 2

    def test_tuple_conversion(self):
        """Test conversion to and from (x, y) tuples."""
        assert Vec2.from_tuple((4, -2)) == Vec2(4, -2)
        assert Vec2(4, -2).to_tuple() == (4, -2)


class TestVec2u:
    """Tests for the unsigned vector."""

    def test_rejects_negative_components(self):
        """Test Vec2u cannot hold negative components."""
        with pytest.raises(ValueError, match="non-negative"):
            Vec2u(-1, 0)

    def test_arithmetic(self):
        """Test addition and scalar multiplication."""
        assert Vec2u(1, 2) + Vec2u(3, 4) == Vec2u(4, 6)
        assert Vec2u(1, 2) * 3 == Vec2u(3, 6)
        assert 2 * Vec2u(1, 2) == Vec2u(2, 4)

    def test_no_subtraction_or_negation(self):
        """Test unsigned vectors do not support subtraction or negation."""
        with pytest.raises(TypeError):
            Vec2u(3, 3) - Vec2u(1, 1)
        with pytest.raises(TypeError):
            -Vec2u(1, 1)

    def test_sign(self):
        """Test sign always converts to the equal signed vector."""
        assert Vec2u(5, 7).sign() == Vec2(5, 7)

    @pytest.mark.parametrize("x, y", [(0, 0), (1, 0), (0, 9), (12, 34)])
    def test_sign_unsign_round_trip(self, x, y):
        """Test unsign undoes sign."""
        u = Vec2u(x, y)
        assert u.sign().unsign() == u


@pytest.mark.parametrize(
    "vector_class, x, y",
    [(Vec2, 1.0, 0), (Vec2, 0, "1"), (Vec2u, 1.5, 0), (Vec2u, 0, None)],
)
def test_non_integer_components_rejected(vector_class, x, y):
    """Test both vector types refuse components that are not integers."""
    with pytest.raises(TypeError, match="must be integers"):
        vector_class(x, y)
