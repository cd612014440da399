import pytest

from iniline import ini
from iniline.ini import Kind, ParseResult


def test_ini_section():
    result = ini.parse("[General]\n")
    assert result == ParseResult(section="General")
    assert result.kind is Kind.SECTION


def test_ini_section_with_spaces():
    assert ini.parse("   [  this is a section ]   \n").section == "this is a section"
    assert ini.parse("   [Section]   \n") == ini.parse("[Section]")


def test_ini_section_ignores_text_after_bracket():
    assert ini.parse("[a] trailing = text") == ParseResult(section="a")


def test_ini_property():
    result = ini.parse("name = John Doe\n")
    assert result == ParseResult(key="name", value="John Doe")
    assert result.kind is Kind.PROPERTY


def test_ini_property_unicode():
    result = ini.parse("こんにちは=konnichiwa")
    assert result.key == "こんにちは"
    assert result.value == "konnichiwa"


def test_ini_property_splits_on_first_equals():
    assert ini.parse("url = a=b=c") == ParseResult(key="url", value="a=b=c")


def test_ini_key_only():
    result = ini.parse("novalue=\n")
    assert result == ParseResult(key="novalue")
    assert result.kind is Kind.KEY_ONLY


def test_ini_value_only():
    result = ini.parse("=onlyvalue\n")
    assert result == ParseResult(value="onlyvalue")
    assert result.kind is Kind.VALUE_ONLY


@pytest.mark.parametrize(
    "line",
    [
        "",
        "\n",
        "  \t  \n",
        "; full line comment\n",
        "# another comment",
        "   ; indented comment\n",
        "just some text\n",
        "[Section",
        "[dangling = bracket\n",
        "=",
        "  =  \n",
        "[]",
        "[   ]\n",
    ],
)
def test_ini_empty(line: str):
    result = ini.parse(line)
    assert result == ParseResult()
    assert result.kind is Kind.EMPTY
    assert not result


def test_ini_empty_is_absent():
    # An empty value cannot be told apart from a missing one.
    assert ini.parse("key=") == ini.parse("key=   ")
    assert ini.parse("key=").value is None


def test_ini_comment():
    assert ini.parse("key=value ; comment\n") == ParseResult(key="key", value="value")
    assert ini.parse("key=value#comment") == ParseResult(key="key", value="value")
    assert ini.parse("[section] ; comment") == ParseResult(section="section")


def test_ini_comment_before_equals():
    assert ini.parse("key ; = value") == ParseResult()


def test_ini_quoted_comment():
    result = ini.parse('key = "a;b#c"\n')
    assert result == ParseResult(key="key", value='"a;b#c"')


def test_ini_quoted_comment_then_comment():
    result = ini.parse('key = "a;b" ; real comment')
    assert result == ParseResult(key="key", value='"a;b"')


def test_ini_unterminated_quote():
    # Everything after an unmatched quote is quoted.
    result = ini.parse('key = "a;b\n')
    assert result == ParseResult(key="key", value='"a;b')


def test_ini_carriage_return():
    assert ini.parse("key=value\r\n") == ParseResult(key="key", value="value")


def test_ini_only_ascii_whitespace_trimmed():
    result = ini.parse("key=\u3000value\u3000")
    assert result.value == "\u3000value\u3000"


def test_ini_none():
    with pytest.raises(TypeError):
        ini.parse(None)  # type: ignore[arg-type]


def test_strip_comment():
    assert ini.strip_comment("a=b ; c\n") == "a=b "
    assert ini.strip_comment('a="b;c"\n') == 'a="b;c"'
    assert ini.strip_comment("a=b\n\n") == "a=b\n"
    assert ini.strip_comment("a=b\r\n") == "a=b\r"


def test_iterparse():
    lines = ["[a]\n", "\n", "x=1\n"]
    results = list(ini.iterparse(lines))

    assert [n for n, _ in results] == [1, 2, 3]
    assert [r.kind for _, r in results] == [Kind.SECTION, Kind.EMPTY, Kind.PROPERTY]


TEST_INI = """\
top = level

[General]
name = John Doe ; the name
novalue =
=orphan
garbage line
[Empty]
[General]
path = "C:\\a;b"
"""


def test_loads():
    config = ini.loads(TEST_INI)

    assert config == {
        "DEFAULT": {"top": "level"},
        "General": {
            "name": "John Doe",
            "novalue": None,
            "path": '"C:\\a;b"',
        },
        "Empty": {},
    }


def test_loads_default_section():
    config = ini.loads("a=1\n", default_section="root")
    assert config == {"root": {"a": "1"}}


def test_loads_duplicate_key():
    assert ini.loads("a=1\na=2\n") == {"DEFAULT": {"a": "2"}}
