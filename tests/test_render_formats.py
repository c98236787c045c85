"""Tests for render.formats: stringify() and mnemonic()."""

from typing import Any

from hypothesis import given
from hypothesis import strategies as st

from structrender.render import mnemonic, stringify
from structrender.text import scalar_text
from tests.strategies import fingerprint_trees, rebuilt


class Labelled(dict):
    """Mapping with its own display text."""

    def __tostring__(self) -> str:
        return "<labelled>"


# ============================================================================
# stringify()
# ============================================================================


class TestStringify:
    """Tests for stringify()."""

    def test_positional_run_drops_keys(self) -> None:
        """Consecutive positions from 1 print as bare values."""
        assert stringify({1: "a", 2: "b", 3: "c"}) == "{a,b,c}"

    def test_mixed_table(self) -> None:
        """Numbers sort first, a gap restores the key, then other keys."""
        assert stringify({"foo": "bar", 1: "baz", 2: "qux", 5: "x"}) == "{baz,qux,5=x,foo=bar}"

    def test_run_not_starting_at_one(self) -> None:
        """Keys show until position 1 or a successor of the previous key."""
        assert stringify({3: "c", 4: "d"}) == "{3=c,d}"

    def test_nested(self) -> None:
        """Nested tables use the same rules."""
        assert stringify({1: {1: "x"}}) == "{{x}}"
        assert stringify({"k": {1: "a", 2: "b"}}) == "{k={a,b}}"

    def test_scalar(self) -> None:
        """Scalars print with str()."""
        assert stringify(42) == "42"
        assert stringify("hi") == "hi"
        assert stringify(None) == "None"

    def test_keys_sorted(self) -> None:
        """Non-numeric keys sort by text regardless of insertion order."""
        assert stringify({"b": 2, "a": 1}) == "{a=1,b=2}"

    def test_tostring_override(self) -> None:
        """__tostring__() supplies the text of a value."""
        assert stringify({1: Labelled(x=1)}) == "{<labelled>}"

    def test_cycle(self) -> None:
        """A back reference prints the placeholder."""
        table: dict[int, Any] = {1: "a"}
        table[2] = table
        assert stringify(table) == f"{{a,{scalar_text(table)}}}"


# ============================================================================
# mnemonic()
# ============================================================================


class TestMnemonic:
    """Tests for mnemonic()."""

    def test_quotes_strings_only(self) -> None:
        """Strings are quoted so 1 and '1' stay distinct."""
        assert mnemonic({"b": 2, "a": "1"}, 1, "1") == "{'a'='1','b'=2},1,'1'"
        assert mnemonic(1) != mnemonic("1")

    def test_no_arguments(self) -> None:
        """No arguments give the empty string."""
        assert mnemonic() == ""

    def test_keys_kept_with_positions(self) -> None:
        """Positional keys are never dropped."""
        assert mnemonic({1: "a", 2: "b"}) == "{1='a',2='b'}"

    def test_order_independent(self) -> None:
        """Insertion order does not change the fingerprint."""
        assert mnemonic({"x": 1, "y": {2: "b", 1: "a"}}) == mnemonic(
            {"y": {1: "a", 2: "b"}, "x": 1}
        )

    def test_identity_independent(self) -> None:
        """Equal but distinct nested tables give the same fingerprint."""
        first = {"k": {1: "a", "n": {2: None}}}
        second = {"k": {"n": {2: None}, 1: "a"}}
        assert first["k"] is not second["k"]
        assert mnemonic(first) == mnemonic(second)

    def test_colliding_key_text(self) -> None:
        """Keys with the same str() are still ordered by type."""
        assert mnemonic({None: 1, "None": 2}) == mnemonic({"None": 2, None: 1})
        assert mnemonic({True: 1, "True": 2}) == mnemonic({"True": 2, True: 1})
        assert mnemonic({None: 1, "None": 2}) == "{None=1,'None'=2}"

    def test_escapes_quotes(self) -> None:
        """Embedded quotes cannot forge a neighbouring token."""
        assert mnemonic("a','b") != mnemonic("a", "b")

    @given(st.dictionaries(st.text(max_size=4), st.integers(), max_size=6), st.randoms())
    def test_shuffled_keys_same_fingerprint(self, table: dict[str, int], rnd: Any) -> None:
        """Property: any permutation of insertion order fingerprints the same."""
        items = list(table.items())
        rnd.shuffle(items)
        assert mnemonic(dict(items)) == mnemonic(table)

    @given(fingerprint_trees, st.randoms())
    def test_structurally_equal_trees(self, tree: Any, rnd: Any) -> None:
        """Property: a rebuilt tree with shuffled insertion order at every
        level fingerprints the same as the original."""
        copy = rebuilt(tree, rnd)
        assert copy == tree
        assert mnemonic(copy) == mnemonic(tree)
