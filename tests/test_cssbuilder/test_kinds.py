"""Tests for fragment kind ordering and sigils."""

from cssbuilder.kinds import Combinator, FragmentKind


class TestFragmentKind:
    def test_order(self):
        assert [k.order for k in FragmentKind] == [0, 1, 2, 3, 4, 5]
        assert list(FragmentKind) == [
            FragmentKind.TYPE,
            FragmentKind.ID,
            FragmentKind.CLASS,
            FragmentKind.ATTRIBUTE,
            FragmentKind.PSEUDO_CLASS,
            FragmentKind.PSEUDO_ELEMENT,
        ]

    def test_repeatable(self):
        assert {k for k in FragmentKind if k.repeatable} == {
            FragmentKind.CLASS,
            FragmentKind.ATTRIBUTE,
            FragmentKind.PSEUDO_CLASS,
        }

    def test_format(self):
        assert FragmentKind.TYPE.format("div") == "div"
        assert FragmentKind.ID.format("a") == "#a"
        assert FragmentKind.CLASS.format("a") == ".a"
        assert FragmentKind.ATTRIBUTE.format("a=b") == "[a=b]"
        assert FragmentKind.PSEUDO_CLASS.format("hover") == ":hover"
        assert FragmentKind.PSEUDO_ELEMENT.format("after") == "::after"

    def test_following(self):
        assert FragmentKind.ATTRIBUTE.following() == (
            FragmentKind.PSEUDO_CLASS,
            FragmentKind.PSEUDO_ELEMENT,
        )
        assert FragmentKind.PSEUDO_ELEMENT.following() == ()


class TestCombinator:
    def test_values(self):
        assert [c.value for c in Combinator] == [" ", ">", "+", "~"]

    def test_renders_as_value(self):
        assert f"{Combinator.GENERAL_SIBLING}" == "~"
