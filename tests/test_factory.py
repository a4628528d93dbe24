import pytest

from gan_core.enums import Side, State
from gan_core.errors import InvalidType
from gan_core.factory import IdentifierFactory


def _make_factory(name="chess", side=Side.FIRST):
    return IdentifierFactory(name, side)


class TestIdentifierFactory:
    def test_piece(self):
        factory = _make_factory()
        king = factory.piece("k")
        assert str(king) == "CHESS:K"
        assert king.style is factory.style

    def test_states(self):
        factory = _make_factory("shogi", Side.SECOND)
        assert str(factory.enhanced("P")) == "shogi:+p"
        assert str(factory.diminished("R")) == "shogi:-r"
        assert factory.piece("B", State.ENHANCED) == factory.enhanced("b")

    def test_terminal(self):
        assert str(_make_factory().piece("K", terminal=True)) == "CHESS:K'"

    def test_opponent_same_style(self):
        opponent = _make_factory().opponent()
        assert opponent.side == Side.SECOND
        assert opponent.name == "CHESS"
        assert str(opponent.piece("Q")) == "chess:q"

    def test_opponent_cross_style(self):
        white = _make_factory()
        gote = white.opponent("shogi")
        assert white.piece("K").cross_style(gote.piece("K"))
        assert str(gote.piece("K")) == "shogi:k"

    def test_bad_type(self):
        with pytest.raises(InvalidType):
            _make_factory().piece("KK")
