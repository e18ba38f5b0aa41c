"""Tests for the translation lookup."""

import pytest

from uniqname.core.errors import ErrorCode, NamingError
from uniqname.naming.pool import InternedName
from uniqname.naming.translation import FunctionKey, MemberKey, TranslationIndex


@pytest.fixture
def key() -> MemberKey:
    return MemberKey(scope=0, name=InternedName(1), number=0, offset=8, size=4)


class TestTranslationIndex:
    def test_given_published_key_when_resolved_then_position(self, key: MemberKey) -> None:
        # Given
        index = TranslationIndex()
        index.publish(key, 3)

        # When
        first = index.resolve(key)
        second = index.resolve(key)

        # Then
        assert first == second == 3

    def test_given_used_key_when_published_then_duplicate_and_unchanged(
        self, key: MemberKey
    ) -> None:
        # Given
        index = TranslationIndex()
        index.publish(key, 3)

        # When
        with pytest.raises(NamingError) as exc_info:
            index.publish(key, 5, symbol="Value")

        # Then
        assert exc_info.value.code == ErrorCode.DUPLICATE_KEY
        assert exc_info.value.details["symbol"] == "Value"
        assert index.resolve(key) == 3
        assert len(index) == 1

    def test_given_unknown_key_when_resolved_then_not_found(self, key: MemberKey) -> None:
        index = TranslationIndex()

        with pytest.raises(NamingError) as exc_info:
            index.resolve(key)

        assert exc_info.value.code == ErrorCode.SYMBOL_NOT_FOUND

    def test_member_and_function_keys_never_alias(self) -> None:
        """Keys of different shapes stay distinct even with equal fields."""
        index = TranslationIndex()
        member = MemberKey(scope=0, name=InternedName(1), number=0, offset=0, size=0)
        function = FunctionKey(scope=0, name=InternedName(1), number=0, index=0)

        index.publish(member, 0)
        index.publish(function, 1)

        assert index.resolve(member) == 0
        assert index.resolve(function) == 1

    @pytest.mark.parametrize(
        "other",
        [
            MemberKey(scope=1, name=InternedName(1), number=0, offset=8, size=4),
            MemberKey(scope=0, name=InternedName(1), number=1, offset=8, size=4),
            MemberKey(scope=0, name=InternedName(1), number=0, offset=12, size=4),
            MemberKey(scope=0, name=InternedName(1), number=0, offset=8, size=8),
        ],
    )
    def test_any_identity_field_distinguishes_members(
        self, key: MemberKey, other: MemberKey
    ) -> None:
        index = TranslationIndex()
        index.publish(key, 0)

        index.publish(other, 1)

        assert other in index
