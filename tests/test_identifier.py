import pytest

from gan_core.config import GrammarConfig
from gan_core.enums import Side, State
from gan_core.errors import (
    InvalidField,
    InvalidPiece,
    InvalidSeparator,
    InvalidSide,
    InvalidState,
    InvalidStyle,
    InvalidType,
    SideMismatch,
)
from gan_core.grammar import Grammar
from gan_core.identifier import CompositeIdentifier
from gan_core.piece import PieceComponent
from gan_core.style import StyleComponent

VALID = ["CHESS:K", "chess:k", "shogi:+p", "SHOGI:-R", "xiangqi:g", "C960:Q", "o:-r"]


def _parse(text):
    return CompositeIdentifier.from_str(text)


def _assert_consistent(identifier):
    assert identifier.style.side == identifier.piece.side


class TestParsing:
    def test_chess_king(self):
        i = _parse("CHESS:K")
        assert i.style.side == Side.FIRST
        assert i.side == Side.FIRST
        assert i.name == "CHESS"
        assert i.type == "K"
        assert i.state == State.NORMAL
        assert str(i) == "CHESS:K"

    def test_promoted_shogi_pawn(self):
        i = _parse("shogi:+p")
        assert i.style.side == Side.SECOND
        assert i.type == "P"
        assert i.state == State.ENHANCED
        assert i.is_enhanced
        assert i.is_second_player
        assert str(i) == "shogi:+p"

    @pytest.mark.parametrize("text", VALID)
    def test_round_trip(self, text):
        assert str(_parse(text)) == text

    def test_component_strings(self):
        i = _parse("SHOGI:-R")
        assert i.to_style_str() == "SHOGI"
        assert i.to_piece_str() == "-R"

    @pytest.mark.parametrize(
        "text,error",
        [
            ("", InvalidSeparator),
            ("CHESS", InvalidSeparator),
            ("CHESS::K", InvalidSeparator),
            ("cHess:k", InvalidStyle),
            ("CHESS:KK", InvalidPiece),
            ("CHESS:++K", InvalidPiece),
            ("CHESS:k", SideMismatch),
            ("chess:K", SideMismatch),
        ],
    )
    def test_errors(self, text, error):
        assert not CompositeIdentifier.is_valid(text)
        with pytest.raises(error):
            _parse(text)

    def test_is_valid_is_total(self):
        assert CompositeIdentifier.is_valid(None) is False
        assert CompositeIdentifier.is_valid(object()) is False

    def test_terminal_marker_requires_grammar_flag(self):
        grammar = Grammar(GrammarConfig(allow_terminal_marker=True))
        i = CompositeIdentifier.from_str("CHESS:K'", grammar)
        assert i.is_terminal
        assert str(i) == "CHESS:K'"
        assert CompositeIdentifier.is_valid("CHESS:K'", grammar)
        assert not CompositeIdentifier.is_valid("CHESS:K'")
        with pytest.raises(InvalidPiece):
            _parse("CHESS:K'")


class TestConstruction:
    def test_from_components(self):
        i = CompositeIdentifier(StyleComponent.from_str("CHESS"), PieceComponent.from_str("+K"))
        assert str(i) == "CHESS:+K"

    def test_mismatched_components_rejected(self):
        style = StyleComponent.from_str("CHESS")
        piece = PieceComponent.from_str("k")
        with pytest.raises(SideMismatch) as exc:
            CompositeIdentifier(style, piece)
        assert exc.value.style_side == Side.FIRST
        assert exc.value.piece_side == Side.SECOND

    def test_components_must_have_right_types(self):
        with pytest.raises(InvalidField):
            CompositeIdentifier("CHESS", PieceComponent.from_str("K"))
        with pytest.raises(InvalidField):
            CompositeIdentifier(StyleComponent.from_str("CHESS"), "K")

    def test_from_parts(self):
        assert str(CompositeIdentifier.from_parts("shogi", "+p")) == "shogi:+p"
        with pytest.raises(SideMismatch):
            CompositeIdentifier.from_parts("shogi", "+P")

    def test_from_params(self):
        i = CompositeIdentifier.from_params("Chess", "k", Side.SECOND, State.DIMINISHED)
        assert str(i) == "chess:-k"
        assert i.type == "K"

    @pytest.mark.parametrize(
        "kwargs,error",
        [
            (dict(name="chess", type="KK", side=Side.FIRST), InvalidType),
            (dict(name="chess", type="K", side="first"), InvalidSide),
            (dict(name="chess", type="K", side=Side.FIRST, state="normal"), InvalidState),
            (dict(name="9", type="K", side=Side.FIRST), InvalidStyle),
        ],
    )
    def test_from_params_errors(self, kwargs, error):
        with pytest.raises(error):
            CompositeIdentifier.from_params(**kwargs)

    def test_dict_round_trip(self):
        i = _parse("shogi:+p")
        d = i.to_dict()
        assert d == {"name": "SHOGI", "type": "P", "side": "SECOND", "state": "ENHANCED", "terminal": False}
        assert CompositeIdentifier.from_dict(d) == i

    def test_from_dict_errors(self):
        with pytest.raises(InvalidSide):
            CompositeIdentifier.from_dict({"name": "chess", "type": "K", "side": "LEFT"})
        with pytest.raises(InvalidState):
            CompositeIdentifier.from_dict({"name": "chess", "type": "K", "side": "FIRST", "state": "BIG"})
        with pytest.raises(InvalidField):
            CompositeIdentifier.from_dict({"name": "chess", "side": "FIRST"})

    @pytest.mark.parametrize("value", [None, "x", ["name", "type", "side"]])
    def test_from_dict_requires_dict(self, value):
        with pytest.raises(InvalidField) as exc:
            CompositeIdentifier.from_dict(value)
        assert exc.value.field == "dict"
        assert exc.value.value == value


class TestTransformations:
    def test_flip(self):
        assert str(_parse("CHESS:K").flip()) == "chess:k"
        assert str(_parse("shogi:+p").flip()) == "SHOGI:+P"

    def test_flip_twice_is_identity(self):
        i = _parse("shogi:+p")
        assert i.flip().flip() == i

    def test_with_state_and_normalize(self):
        enhanced = _parse("CHESS:K").with_state(State.ENHANCED)
        assert str(enhanced) == "CHESS:+K"
        assert str(enhanced.normalize()) == "CHESS:K"

    def test_normalize_idempotent(self):
        i = _parse("shogi:-p")
        assert i.normalize().normalize() == i.normalize()

    def test_enhance_and_diminish(self):
        i = _parse("xiangqi:r")
        assert str(i.enhance()) == "xiangqi:+r"
        assert str(i.diminish()) == "xiangqi:-r"

    def test_with_type(self):
        assert str(_parse("shogi:+p").with_type("R")) == "shogi:+r"

    def test_with_name(self):
        i = _parse("shogi:+p")
        assert str(i.with_name("ogi")) == "ogi:+p"
        assert str(i.with_style("OGI")) == "ogi:+p"

    def test_with_side(self):
        i = _parse("CHESS:-K")
        assert str(i.with_side(Side.SECOND)) == "chess:-k"

    def test_with_side_rejects_non_enum(self):
        with pytest.raises(InvalidSide):
            _parse("CHESS:K").with_side("second")

    def test_with_terminal(self):
        assert str(_parse("CHESS:K").with_terminal(True)) == "CHESS:K'"

    def test_terminal_reparses_only_with_flag(self):
        text = str(_parse("CHESS:K").with_terminal(True))
        assert not CompositeIdentifier.is_valid(text)
        grammar = Grammar(GrammarConfig(allow_terminal_marker=True))
        assert CompositeIdentifier.from_str(text, grammar) == _parse("CHESS:K").with_terminal(True)

    def test_noop_returns_same_instance(self):
        i = _parse("shogi:+p")
        assert i.with_state(i.state) is i
        assert i.enhance() is i
        assert i.with_type("P") is i
        assert i.with_name("Shogi") is i
        assert i.with_side(Side.SECOND) is i
        assert i.with_terminal(False) is i
        n = _parse("CHESS:K")
        assert n.normalize() is n

    def test_invariant_preserved(self):
        i = _parse("CHESS:K")
        for derived in [
            i.enhance(),
            i.diminish(),
            i.normalize(),
            i.flip(),
            i.with_type("Q"),
            i.with_name("ogi"),
            i.with_side(Side.SECOND),
            i.flip().enhance().with_type("p"),
        ]:
            _assert_consistent(derived)

    def test_receiver_is_unchanged(self):
        i = _parse("CHESS:K")
        i.flip()
        i.enhance()
        assert str(i) == "CHESS:K"


class TestComparisons:
    def test_equality(self):
        assert _parse("CHESS:K") == CompositeIdentifier.from_params("chess", "K", Side.FIRST)
        assert _parse("CHESS:K") != _parse("chess:k")
        assert _parse("CHESS:K") != "CHESS:K"

    def test_hash_and_set(self):
        ids = {_parse("CHESS:K"), CompositeIdentifier.from_params("Chess", "k", Side.FIRST), _parse("chess:k")}
        assert len(ids) == 2

    def test_dict_key(self):
        values = {_parse("shogi:+p"): "tokin"}
        assert values[CompositeIdentifier.from_parts("shogi", "+p")] == "tokin"

    def test_cross_style(self):
        chess = _parse("CHESS:K")
        shogi = _parse("shogi:k")
        assert chess.cross_style(shogi)
        assert not chess.same_style(shogi)
        assert chess.same_type(shogi)
        assert not chess.same_side(shogi)
        assert chess.same_state(shogi)
        assert chess.same_style(_parse("chess:q"))

    def test_repr(self):
        assert repr(_parse("shogi:+p")) == "CompositeIdentifier('shogi:+p')"
