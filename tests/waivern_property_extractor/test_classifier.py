"""Tests for property declaration classification."""

import pytest

from waivern_property_extractor import is_property_declaration


class TestIsPropertyDeclaration:
    """Test the declaration line predicate."""

    @pytest.mark.parametrize(
        "line",
        [
            "    private $name;",
            "public $a",
            "protected $_count = 0;",
            "\tprivate $name;",
            "private $user_id2;",
            "    public $items = [];",
        ],
        ids=[
            "indented_private",
            "bare_public",
            "protected_with_default",
            "tab_indented",
            "snake_case_with_digit",
            "array_default",
        ],
    )
    def test_declarations_are_recognised(self, line: str) -> None:
        """Visibility keyword, one space and a `$` identifier is a declaration."""
        assert is_property_declaration(line) is True

    @pytest.mark.parametrize(
        "line",
        [
            "private static $name;",
            "private int $age;",
            "private  $name;",
            "privately $name;",
            "var $name;",
            "$name = 1;",
            "private $1abc;",
            "// private $name;",
            "public function getName()",
            "",
        ],
        ids=[
            "static_modifier",
            "inline_type",
            "double_space",
            "keyword_prefix",
            "legacy_var",
            "assignment",
            "digit_identifier",
            "commented_out",
            "method",
            "empty",
        ],
    )
    def test_other_lines_are_rejected(self, line: str) -> None:
        """Anything else is not a declaration."""
        assert is_property_declaration(line) is False
