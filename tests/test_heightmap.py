import pytest

from fdfview.color import WHITE
from fdfview.heightmap import HeightMap, MapError, check_map_path, load_map, parse_map


def test_parse_dimensions_and_heights():
    hmap = parse_map(["0 0 0\n", "0 10 0\n"])
    assert (hmap.width, hmap.height) == (3, 2)
    assert len(hmap.points) == 6
    assert hmap.point(1, 1).z == 10
    assert hmap.point(0, 0).z == 0


def test_parse_grid_coordinates_span_unit_square():
    hmap = parse_map(["0 0 0\n", "0 0 0\n", "0 0 0\n"])
    assert hmap.point(0, 0).x == -0.5
    assert hmap.point(2, 0).x == 0.5
    assert hmap.point(0, 2).y == 0.5
    assert hmap.point(1, 1).x == 0.0


def test_parse_colors():
    hmap = parse_map(["5,0xFF0000 3\n"])
    assert hmap.point(0, 0).color == 0xFF0000
    assert hmap.point(0, 0).z == 5
    assert hmap.point(1, 0).color == WHITE


def test_parse_color_with_trailing_newline():
    hmap = parse_map(["1 2,0x00ff00\n"])
    assert hmap.point(1, 0).color == 0x00FF00


def test_trailing_newline_word_is_not_counted():
    hmap = parse_map(["1 2 \n", "3 4\n"])
    assert hmap.width == 2
    assert hmap.point(1, 1).z == 4


def test_single_column_map():
    hmap = parse_map(["1\n", "2\n"])
    assert hmap.width == 1
    assert hmap.point(0, 1).y == 0.5


def test_short_line_is_rejected():
    with pytest.raises(MapError, match="Line 2 is too short"):
        parse_map(["0 0 0\n", "0 0\n"])


def test_long_line_is_rejected():
    with pytest.raises(MapError, match="Line 3 is too long"):
        parse_map(["0 0\n", "0 0\n", "0 0 0\n"])


def test_empty_map_is_rejected():
    with pytest.raises(MapError, match="empty"):
        parse_map([])


def test_point_outside_raises():
    hmap = parse_map(["0 0\n"])
    with pytest.raises(IndexError):
        hmap.point(2, 0)


def test_z_range():
    hmap = parse_map(["-3 0 7\n"])
    assert hmap.z_range() == (-3, 7)


def test_z_range_of_empty_map():
    with pytest.raises(ValueError):
        HeightMap().z_range()


def test_normalize_spans_half_unit():
    hmap = parse_map(["-3 0 7\n", "1 2 3\n"])
    hmap.normalize_z()
    heights = [p.z for p in hmap.points]
    assert min(heights) == pytest.approx(-0.5)
    assert max(heights) == pytest.approx(0.5)


def test_normalize_flat_nonzero_map():
    hmap = parse_map(["4 4\n", "4 4\n"])
    hmap.normalize_z()
    assert all(p.z == pytest.approx(-0.5) for p in hmap.points)


def test_normalize_flat_zero_map_is_unchanged():
    hmap = parse_map(["0 0\n"])
    hmap.normalize_z()
    assert [p.z for p in hmap.points] == [0.0, 0.0]


def test_load_map_normalizes(tmp_path):
    path = tmp_path / "hill.fdf"
    path.write_text("0 0 0\n0 10 0\n0 0 0\n")
    hmap = load_map(path)
    assert (hmap.width, hmap.height) == (3, 3)
    assert hmap.point(1, 1).z == pytest.approx(0.5)
    assert hmap.point(0, 0).z == pytest.approx(-0.5)


def test_load_missing_file(tmp_path):
    with pytest.raises(MapError, match="could not open"):
        load_map(tmp_path / "missing.fdf")


def test_load_empty_file(tmp_path):
    path = tmp_path / "empty.fdf"
    path.write_text("")
    with pytest.raises(MapError, match="empty"):
        load_map(path)


def test_check_path_accepts_fdf(tmp_path):
    path = tmp_path / "ok.fdf"
    assert check_map_path(str(path)) == path


def test_check_path_rejects_directory(tmp_path):
    folder = tmp_path / "maps.fdf"
    folder.mkdir()
    with pytest.raises(MapError, match="could not open"):
        check_map_path(folder)


def test_check_path_rejects_extension(tmp_path):
    with pytest.raises(MapError, match="extension"):
        check_map_path(tmp_path / "map.txt")