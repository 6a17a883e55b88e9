from sqlloader.core.comments import clean_sql, strip_comments


def test_strips_line_and_block_comments():
    text = "-- a comment\nSELECT * FROM users\n/* block\n   comment */\nWHERE id = 1\n"
    assert clean_sql(text, "\n") == "SELECT * FROM users\nWHERE id = 1"


def test_drops_empty_lines_but_keeps_whitespace_lines():
    lines = ["SELECT 1\n", "\n", "   \n", "FROM dual\n"]
    assert list(strip_comments(lines)) == ["SELECT 1", "   ", "FROM dual"]


def test_indented_line_comment_is_dropped():
    assert list(strip_comments(["    -- note", "  SELECT 1"])) == ["  SELECT 1"]


def test_single_line_block_comment_is_dropped():
    assert list(strip_comments(["/* header */", "SELECT 1"])) == ["SELECT 1"]


def test_text_after_block_comment_is_kept():
    lines = ["/* one */ /* two */ SELECT 1", "/* multi", "line */ FROM t"]
    assert list(strip_comments(lines)) == ["SELECT 1", "FROM t"]


def test_trailing_block_comment_hides_following_lines():
    lines = ["SELECT a, /* columns", "b, c", "*/", "FROM t"]
    assert list(strip_comments(lines)) == ["SELECT a, /* columns", "FROM t"]


def test_markers_inside_literals_are_kept():
    lines = ["SELECT * FROM t WHERE path LIKE '/*%'", "AND note = '-- x'", "ORDER BY 1"]
    assert list(strip_comments(lines)) == lines


def test_inline_line_comment_keeps_line_verbatim():
    lines = ["SELECT 1 -- trailing /* not a block", "FROM t"]
    assert list(strip_comments(lines)) == lines


def test_windows_line_endings_are_removed():
    assert clean_sql("SELECT 1\r\n-- x\r\nFROM t\r\n", "\n") == "SELECT 1\nFROM t"


def test_comment_only_script_is_empty():
    assert clean_sql("-- nothing\n/*\n*/\n", "\n") == ""
