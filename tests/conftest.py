"""
Pytest configuration and shared fixtures for jsexpr tests.

Provides immutable test data fixtures for documents that must parse,
documents that must be rejected, and expected S-expression renderings.
"""

from dataclasses import dataclass

import pytest

import jsexpr


@dataclass(frozen=True)
class JsonTestCase:
    """
    Immutable container for JSON test case data.

    Holds test input and expected behavior for consistent test execution.
    """

    description: str
    input_data: str
    should_fail: bool = False
    expected_output: str | None = None
    expected_kind: jsexpr.ErrorKind | None = None


@pytest.fixture
def json_fail_cases() -> list[JsonTestCase]:
    """
    Provides JSON strings that must fail parsing.

    Taken from the json.org JSON_checker suite and the converter's own
    edge-case list. Checker cases the converter deliberately tolerates
    (trailing content, unknown escapes, raw control characters) live in
    ``json_lenient_cases`` instead.
    """
    kinds = jsexpr.ErrorKind
    return [
        JsonTestCase("fail2.json", '["Unclosed array"', True),
        JsonTestCase(
            "fail3.json", '{unquoted_key: "keys must be quoted"}', True
        ),
        JsonTestCase("fail4.json", '["extra comma",]', True),
        JsonTestCase("fail5.json", '["double extra comma",,]', True),
        JsonTestCase("fail6.json", '[   , "<-- missing value"]', True),
        JsonTestCase("fail9.json", '{"Extra comma": true,}', True),
        JsonTestCase("fail11.json", '{"Illegal expression": 1 + 2}', True),
        JsonTestCase("fail12.json", '{"Illegal invocation": alert()}', True),
        JsonTestCase(
            "fail13.json",
            '{"Numbers cannot have leading zeroes": 013}',
            True,
            expected_kind=kinds.INVALID_NUMBER,
        ),
        JsonTestCase("fail14.json", '{"Numbers cannot be hex": 0x14}', True),
        JsonTestCase("fail16.json", "[\\naked]", True),
        JsonTestCase(
            "fail19.json",
            '{"Missing colon" null}',
            True,
            expected_kind=kinds.MISSING_SEPARATOR,
        ),
        JsonTestCase("fail20.json", '{"Double colon":: null}', True),
        JsonTestCase("fail21.json", '{"Comma instead of colon", null}', True),
        JsonTestCase(
            "fail22.json", '["Colon instead of comma": false]', True
        ),
        JsonTestCase("fail23.json", '["Bad value", truth]', True),
        JsonTestCase("fail24.json", "['single quote']", True),
        JsonTestCase("fail29.json", "[0e]", True),
        JsonTestCase("fail30.json", "[0e+]", True),
        JsonTestCase("fail31.json", "[0e+-1]", True),
        JsonTestCase(
            "fail32.json", '{"Comma instead if closing brace": true,', True
        ),
        JsonTestCase("fail33.json", '["mismatch"}', True),
        JsonTestCase(
            "trailing comma in array",
            "[1,2,]",
            True,
            expected_kind=kinds.UNEXPECTED_TOKEN,
        ),
        JsonTestCase(
            "trailing comma in object",
            '{"a":1,}',
            True,
            expected_kind=kinds.UNEXPECTED_TOKEN,
        ),
        JsonTestCase(
            "missing comma in array",
            "[1 2]",
            True,
            expected_kind=kinds.MISSING_SEPARATOR,
        ),
        JsonTestCase(
            "missing comma in object",
            '{"a":1 "b":2}',
            True,
            expected_kind=kinds.MISSING_SEPARATOR,
        ),
        JsonTestCase(
            "missing value",
            '{"a":}',
            True,
            expected_kind=kinds.UNEXPECTED_TOKEN,
        ),
        JsonTestCase(
            "unclosed array",
            "[1,2",
            True,
            expected_kind=kinds.MISSING_SEPARATOR,
        ),
        JsonTestCase(
            "unclosed object",
            '{"a":1',
            True,
            expected_kind=kinds.MISSING_SEPARATOR,
        ),
        JsonTestCase(
            "unclosed string",
            '"hello',
            True,
            expected_kind=kinds.UNTERMINATED_STRING,
        ),
        JsonTestCase(
            "mismatched brackets",
            "[}",
            True,
            expected_kind=kinds.UNEXPECTED_TOKEN,
        ),
        JsonTestCase(
            "invalid keyword",
            "tru",
            True,
            expected_kind=kinds.UNEXPECTED_CHARACTER,
        ),
        JsonTestCase(
            "leading zero",
            "01",
            True,
            expected_kind=kinds.INVALID_NUMBER,
        ),
        JsonTestCase(
            "negative leading zero",
            "-01",
            True,
            expected_kind=kinds.INVALID_NUMBER,
        ),
        JsonTestCase(
            "invalid character",
            "@",
            True,
            expected_kind=kinds.UNEXPECTED_CHARACTER,
        ),
        JsonTestCase(
            "lone comma", ",", True, expected_kind=kinds.UNEXPECTED_TOKEN
        ),
        JsonTestCase(
            "lone colon", ":", True, expected_kind=kinds.UNEXPECTED_TOKEN
        ),
        JsonTestCase(
            "empty input", "", True, expected_kind=kinds.UNEXPECTED_TOKEN
        ),
        JsonTestCase(
            "whitespace only",
            "   \n\t ",
            True,
            expected_kind=kinds.UNEXPECTED_TOKEN,
        ),
    ]


@pytest.fixture
def json_lenient_cases() -> list[JsonTestCase]:
    """
    Provides JSON_checker failure cases that the converter accepts.

    The tokenizer keeps unknown escapes verbatim and allows raw control
    characters in strings; content after the first value only warns.
    """
    return [
        JsonTestCase(
            "fail1.json - scalar payload",
            '"A JSON payload should be an object or array, not a string."',
        ),
        JsonTestCase(
            "fail7.json - comma after the close",
            '["Comma after the close"],',
        ),
        JsonTestCase("fail8.json - extra close", '["Extra close"]]'),
        JsonTestCase(
            "fail10.json - extra value after close",
            '{"Extra value after close": true} "misplaced quoted value"',
        ),
        JsonTestCase(
            "fail15.json - unknown escape",
            '["Illegal backslash escape: \\x15"]',
        ),
        JsonTestCase(
            "fail17.json - octal escape",
            '["Illegal backslash escape: \\017"]',
        ),
        JsonTestCase(
            "fail18.json - 19 levels of nesting",
            '[[[[[[[[[[[[[[[[[[["Too deep"]]]]]]]]]]]]]]]]]]]',
        ),
        JsonTestCase(
            "fail25.json - raw tabs", '["\ttab\tcharacter\tin\tstring\t"]'
        ),
        JsonTestCase("fail27.json - raw newline", '["line\nbreak"]'),
        JsonTestCase(
            "control character", '["A\u001fZ control characters in string"]'
        ),
    ]


@pytest.fixture
def json_pass_cases() -> list[JsonTestCase]:
    """
    Provides JSON documents together with their exact S-expression output.
    """
    return [
        JsonTestCase("empty object", "{}", expected_output="(json:object)"),
        JsonTestCase("empty array", "[]", expected_output="(json:array)"),
        JsonTestCase("number", "123", expected_output="123"),
        JsonTestCase("string", '"hello"', expected_output='"hello"'),
        JsonTestCase("true", "true", expected_output="#t"),
        JsonTestCase("false", "false", expected_output="#f"),
        JsonTestCase("null", "null", expected_output="nil"),
        JsonTestCase(
            "object with array member",
            '{"a":1,"b":[true,false,null]}',
            expected_output=(
                "(json:object\n"
                "  (json:a 1)\n"
                "  (json:b (json:array\n"
                "    #t\n"
                "    #f\n"
                "    nil)))"
            ),
        ),
        JsonTestCase(
            "nested objects",
            '{"outer":{"inner":"value"}}',
            expected_output=(
                "(json:object\n"
                "  (json:outer (json:object\n"
                '    (json:inner "value"))))'
            ),
        ),
        JsonTestCase(
            "nested arrays",
            "[[1,2],[3,4]]",
            expected_output=(
                "(json:array\n"
                "  (json:array\n"
                "    1\n"
                "    2)\n"
                "  (json:array\n"
                "    3\n"
                "    4))"
            ),
        ),
        JsonTestCase(
            "mixed array",
            '[1,"hello",true,null,{}]',
            expected_output=(
                "(json:array\n"
                "  1\n"
                '  "hello"\n'
                "  #t\n"
                "  nil\n"
                "  (json:object))"
            ),
        ),
        JsonTestCase(
            "array inside object inside array",
            '{"a":[1,2,{"b":true}]}',
            expected_output=(
                "(json:object\n"
                "  (json:a (json:array\n"
                "    1\n"
                "    2\n"
                "    (json:object\n"
                "      (json:b #t)))))"
            ),
        ),
    ]
