import pytest

from cubcaster.scene import (
    UNSET_COLOR,
    SceneConfig,
    SceneError,
    ltrim,
    parse_color,
    parse_file,
    parse_lines,
)

SAMPLE = [
    "NO ./textures/north.xpm\n",
    "SO ./textures/south.xpm\n",
    "WE ./textures/west.xpm\n",
    "EA ./textures/east.xpm\n",
    "\n",
    "F 220,100,0\n",
    "C 225,30,0\n",
    "\n",
    "111111\n",
    "100001\n",
    "  10N001\n",
    "111111",
]


def test_ltrim_removes_only_leading_blanks():
    assert ltrim(" \t  abc  ") == "abc  "
    assert ltrim("abc") == "abc"
    assert ltrim("\nabc") == "\nabc"


def test_parse_color_three_components():
    assert parse_color("220,100,0") == (220, 100, 0)


def test_parse_color_ignores_extra_components():
    assert parse_color("1,2,3,4") == (1, 2, 3)


def test_parse_color_skips_empty_fields():
    assert parse_color("7,,8,9") == (7, 8, 9)


def test_parse_color_too_few_components():
    with pytest.raises(SceneError):
        parse_color("1,2")


def test_parse_lines_reads_all_entries():
    config = parse_lines(SAMPLE)
    assert config.texture_no == "./textures/north.xpm"
    assert config.texture_so == "./textures/south.xpm"
    assert config.texture_we == "./textures/west.xpm"
    assert config.texture_ea == "./textures/east.xpm"
    assert config.floor_color == (220, 100, 0)
    assert config.ceiling_color == (225, 30, 0)
    assert config.map == ["111111", "100001", "10N001", "111111"]
    assert config.map_lines == 4


def test_texture_paths_order():
    config = parse_lines(SAMPLE)
    assert config.texture_paths() == (
        "./textures/east.xpm",
        "./textures/north.xpm",
        "./textures/south.xpm",
        "./textures/west.xpm",
    )


def test_texture_paths_missing_entry():
    config = parse_lines(["NO a", "SO b", "WE c"])
    with pytest.raises(SceneError, match="EA"):
        config.texture_paths()


def test_default_config_is_unset():
    config = SceneConfig()
    assert config.floor_color == UNSET_COLOR
    assert config.ceiling_color == UNSET_COLOR
    assert config.map == []
    assert config.map_lines == 0


def test_process_line_bad_color_raises():
    config = SceneConfig()
    with pytest.raises(SceneError):
        config.process_line("F 1,2")


def test_process_line_blank_lines_ignored():
    config = SceneConfig()
    config.process_line("   \t ")
    config.process_line("")
    assert config.map_lines == 0


def test_only_one_trailing_newline_removed():
    config = parse_lines(["1011\r\n"])
    assert config.map == ["1011\r"]


def test_parse_file_round_trip(tmp_path):
    path = tmp_path / "scene.cub"
    path.write_text("".join(SAMPLE), encoding="utf-8")
    assert parse_file(path) == parse_lines(SAMPLE)


def test_parse_file_missing(tmp_path):
    with pytest.raises(SceneError):
        parse_file(tmp_path / "absent.cub")