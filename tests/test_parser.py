import io
import pathlib

import pytest

from errors import YamlReadError, YamlSyntaxError
from yaml_parser import extract_string_value, load, parse_lines, parse_stream, parse_text
from yaml_path import YamlPath

FIXTURES = pathlib.Path(__file__).parent / "fixtures"


def assert_values(document, expected):
    for needles, value in expected.items():
        assert document.find_value(YamlPath.of(*needles)) == value, needles


def test_parses_simple_file():
    document = load(FIXTURES / "simple.yml")

    assert_values(
        document,
        {
            ("author",): "Tom",
            ("database",): None,
            ("database", "driver"): "newdriver",
            ("database", "port"): "6601",
            ("database", "dbname"): "newdb",
            ("database", "username"): "appuser",
            ("database", "password"): "apppassword",
        },
    )


def test_parses_list_of_mappings():
    document = load(FIXTURES / "complex-arrays.yml")

    assert_values(
        document,
        {
            ("data",): None,
            ("data", "0"): None,
            ("data", "0", "id"): "1",
            ("data", "0", "name"): "Franc",
            ("data", "0", "roles"): None,
            ("data", "0", "roles", "0"): "admin",
            ("data", "0", "roles", "1"): "hr",
            ("data", "1", "id"): "2",
            ("data", "1", "name"): "John",
            ("data", "1", "roles", "0"): "admin",
            ("data", "1", "roles", "1"): "finance",
            ("data", "2"): None,
        },
    )
    assert document.count_elements(YamlPath.of("data")) == 2


def test_flat_document_returns_every_value():
    document = parse_text("name: demo\nversion: 1.2.0\nenabled: true\n")

    assert_values(
        document,
        {("name",): "demo", ("version",): "1.2.0", ("enabled",): "true", ("missing",): None},
    )


def test_scalar_list_items_are_indexed_in_order():
    document = parse_text("tags:\n  - red\n  - green\n  - blue\n")

    assert document.find_value(YamlPath.of("tags")) is None
    assert [document.find_value(YamlPath.of("tags", str(i))) for i in range(3)] == [
        "red",
        "green",
        "blue",
    ]


def test_composite_list_items_increment_index_per_block():
    text = "\n".join(
        [
            "users:",
            "  - name: a",
            "    role: x",
            "    team: y",
            "  - name: b",
            "  - name: c",
            "    role: z",
        ]
    )
    document = parse_text(text)

    assert document.count_elements(YamlPath.of("users")) == 3
    assert document.find_value(YamlPath.of("users", "0", "team")) == "y"
    assert document.find_value(YamlPath.of("users", "1", "name")) == "b"
    assert document.find_value(YamlPath.of("users", "2", "role")) == "z"


def test_list_item_fields_align_after_wide_dash_gap():
    text = "\n".join(
        [
            "users:",
            "  -   name: a",
            "      role: x",
            "  -   name: b",
        ]
    )
    document = parse_text(text)

    assert document.count_elements(YamlPath.of("users")) == 2
    assert document.count_elements(YamlPath.of("users", "0")) == 2
    assert document.find_value(YamlPath.of("users", "0", "role")) == "x"
    assert document.find_value(YamlPath.of("users", "1", "name")) == "b"


def test_list_item_key_without_value_opens_nested_level():
    document = parse_text("jobs:\n  - steps:\n      - build\n      - test\n")

    assert document.find_value(YamlPath.of("jobs", "0", "steps", "1")) == "test"


def test_quoted_value_keeps_hash():
    document = parse_text('a: "a # not a comment"\nb: bare # trailing comment\n')

    assert document.find_value(YamlPath.of("a")) == "a # not a comment"
    assert document.find_value(YamlPath.of("b")) == "bare"


def test_comments_and_blank_lines_are_ignored():
    text = "# heading\n\nkey: value\n      # oddly indented comment\n   \nother: 2\n"
    document = parse_text(text)

    assert document.child_count() == 2
    assert document.find_value(YamlPath.of("other")) == "2"


def test_leading_document_markers_are_skipped():
    document = parse_text("---\n---\nkey: value\n")

    assert document.child_count() == 1
    assert document.find_value(YamlPath.of("key")) == "value"


def test_document_marker_after_content_is_a_key():
    document = parse_text("key: value\n---\nother: 1\n")

    assert [child.name for child in document.iter_children()] == ["key", "---", "other"]
    assert document.exists(YamlPath.of("---"))


def test_key_without_colon_has_no_value():
    document = parse_text("standalone\n")

    assert document.exists(YamlPath.of("standalone"))
    assert document.find_value(YamlPath.of("standalone")) is None


def test_dedent_to_unopened_level_raises_with_line_number():
    with pytest.raises(YamlSyntaxError) as excinfo:
        load(FIXTURES / "bad-indent.yml")

    assert excinfo.value.line_number == 4
    assert "line 4" in str(excinfo.value)


def test_mixed_tabs_and_spaces_raise():
    with pytest.raises(YamlSyntaxError) as excinfo:
        parse_lines(["root:", "  a: 1", "\tb: 2"])

    assert excinfo.value.line_number == 3
    assert excinfo.value.line == "\tb: 2"


def test_line_numbers_count_skipped_lines():
    with pytest.raises(YamlSyntaxError) as excinfo:
        parse_text("---\n# comment\n\nroot:\n    deep: 1\n  bad: 2\n")

    assert excinfo.value.line_number == 6


def test_reparsing_gives_equivalent_documents():
    lines = (FIXTURES / "complex-arrays.yml").read_text(encoding="utf-8").splitlines()

    first = parse_lines(lines)
    second = parse_lines(lines)

    assert first is not second
    assert list(first.iter_scalars()) == list(second.iter_scalars())


def test_parse_stream_strips_line_endings():
    document = parse_stream(io.StringIO("a:\r\n  b: 1\r\n"))

    assert document.find_value(YamlPath.of("a", "b")) == "1"


def test_parse_text_splits_lines_like_load(tmp_path):
    text = "title: a\u2028b\nnote: x\x0cy\nsep: p\x85q\n"
    path = tmp_path / "separators.yml"
    path.write_bytes(text.encode("utf-8"))

    from_text = parse_text(text)
    from_file = load(path)

    assert [child.name for child in from_text.iter_children()] == ["title", "note", "sep"]
    assert from_text.find_value(YamlPath.of("title")) == "a\u2028b"
    assert from_text.find_value(YamlPath.of("note")) == "x\x0cy"
    assert list(from_text.iter_scalars()) == list(from_file.iter_scalars())


def test_parse_stream_wraps_read_errors():
    class BrokenStream:
        def __iter__(self):
            raise OSError("disk gone")

    with pytest.raises(YamlReadError):
        parse_stream(BrokenStream())


def test_load_missing_file_raises_read_error(tmp_path):
    with pytest.raises(YamlReadError):
        load(tmp_path / "missing.yml")


@pytest.mark.parametrize(
    ("raw", "expected"),
    [
        ('"quoted # value"', "quoted # value"),
        ("'single # quoted'", "single # quoted"),
        (r'"esc \" aped"', r"esc \" aped"),
        ('""', ""),
        ("plain   # comment", "plain"),
        ("  spaced  ", "spaced"),
        ('"unterminated', '"unterminated'),
        ("# only a comment", None),
        ("   ", None),
        (None, None),
    ],
)
def test_extract_string_value(raw, expected):
    assert extract_string_value(raw) == expected
