import pytest

from minirt.parser import (
    ParseError,
    SceneParser,
    check_filename,
    load_scene,
    parse_scene,
)
from minirt.scene import Color
from minirt.vector import Vector

VALID = (
    "A 0.2 255,255,255\n"
    "C -50,0,20 0,0,1 70\n"
    "L -40,0,30 0.7 255,255,255\n"
    "sp 0,0,20 20 255,0,0\n"
    "pl 0,0,0 0,1,0 0,0,225\n"
    "cy 50.0,0.0,20.6 0,0,1.0 14.2 21.42 10,0,255\n"
)


def _lines(text=VALID):
    return text.splitlines(keepends=True)


def _replace(prefix, new_line):
    return [new_line if line.startswith(prefix) else line for line in _lines()]


def test_valid_scene_values():
    scene = parse_scene(_lines())
    assert scene.ambient.ratio == 0.2
    assert scene.ambient.color == Color(255, 255, 255)
    assert scene.camera.origin == Vector(-50, 0, 20)
    assert scene.camera.direction == Vector(0, 0, 1)
    assert scene.camera.fov == 70
    assert scene.light.origin == Vector(-40, 0, 30)
    assert scene.light.brightness == 0.7


def test_valid_scene_objects():
    scene = parse_scene(_lines())
    assert scene.is_complete()
    (sphere,) = scene.spheres
    assert sphere.center == Vector(0, 0, 20)
    assert sphere.diameter == 20
    assert sphere.color == Color(255, 0, 0)
    (plane,) = scene.planes
    assert plane.normal == Vector(0, 1, 0)
    assert plane.color == Color(0, 0, 225)
    (cylinder,) = scene.cylinders
    assert cylinder.center == Vector(50.0, 0.0, 20.6)
    assert cylinder.axis == Vector(0, 0, 1.0)
    assert cylinder.diameter == 14.2
    assert cylinder.height == 21.42
    assert cylinder.color == Color(10, 0, 255)


def test_several_spheres_keep_order():
    lines = _lines() + ["sp 1,2,3 4 1,2,3\n", "sp 5,6,7 8 4,5,6\n"]
    scene = parse_scene(lines)
    assert [s.center for s in scene.spheres] == [
        Vector(0, 0, 20), Vector(1, 2, 3), Vector(5, 6, 7)
    ]


def test_blank_lines_are_ignored():
    lines = ["\n"] + _lines() + ["   \n", ""]
    assert parse_scene(lines).spheres[0].diameter == 20


def test_leading_spaces_allowed_for_single_letter_ids():
    scene = parse_scene(_replace("A", "   A 0.2 255,255,255\n"))
    assert scene.ambient.ratio == 0.2


def test_leading_spaces_rejected_for_objects():
    with pytest.raises(ParseError, match="unexpected identifier"):
        parse_scene(_replace("sp", "  sp 0,0,20 20 255,0,0\n"))


def test_unknown_identifier():
    with pytest.raises(ParseError, match="unexpected identifier"):
        parse_scene(_lines() + ["X 1,1,1\n"])


@pytest.mark.parametrize("prefix", ["A", "C", "L"])
def test_duplicate_unique_elements(prefix):
    extra = next(line for line in _lines() if line.startswith(prefix))
    with pytest.raises(ParseError, match=f"No more than one {prefix}"):
        parse_scene(_lines() + [extra])


@pytest.mark.parametrize("prefix", ["A", "C", "L", "sp", "pl", "cy"])
def test_missing_element(prefix):
    lines = [line for line in _lines() if not line.startswith(prefix)]
    with pytest.raises(ParseError, match="Missing identifier"):
        parse_scene(lines)


@pytest.mark.parametrize(
    "prefix, line",
    [
        ("A", "A 2 255,255,255\n"),
        ("A", "A 0.2 256,255,255\n"),
        ("C", "C 0,0,0 0,2,0 70\n"),
        ("C", "C 0,0,0 0,0,1 181\n"),
        ("L", "L 0,0,0 2 255,255,255\n"),
        ("sp", "sp 0,0,0 1 255,300,0\n"),
        ("pl", "pl 0,0,0 0,-2,0 1,1,1\n"),
        ("cy", "cy 0,0,0 0,0,1 1 1 -1,0,0\n"),
    ],
)
def test_out_of_range_values(prefix, line):
    with pytest.raises(ParseError, match="out of range"):
        parse_scene(_replace(prefix, line))


def test_range_check_uses_integer_part():
    scene = parse_scene(_replace("A", "A 1.5 255,255,255\n"))
    assert scene.ambient.ratio == 1.5


@pytest.mark.parametrize(
    "prefix, line",
    [
        ("A", "A 0.2\n"),
        ("C", "C 0,0,0 0,0,1\n"),
        ("sp", "sp 0,0,0 1 1,1,1 extra\n"),
        ("cy", "cy 0,0,0 0,0,1 1 1,1,1\n"),
        ("A", "A 0.2 255,255,255 \n"),
    ],
)
def test_wrong_field_count(prefix, line):
    with pytest.raises(ParseError, match="element number"):
        parse_scene(_replace(prefix, line))


def test_identifier_too_long():
    with pytest.raises(ParseError, match="invalid identifier"):
        parse_scene(_replace("sp", "spx 0,0,0 1 1,1,1\n"))


@pytest.mark.parametrize(
    "prefix, line",
    [
        ("sp", "sp 0,0,0 abc 255,0,0\n"),
        ("pl", "pl 0,0 0,1,0 1,1,1\n"),
        ("C", "C 0,0,0 0,0,1 7.0.1\n"),
    ],
)
def test_malformed_numbers(prefix, line):
    with pytest.raises(ParseError, match="invalid"):
        parse_scene(_replace(prefix, line))


def test_light_color_is_not_checked():
    scene = parse_scene(_replace("L", "L 1,2,3 0.5 whatever\n"))
    assert scene.light.origin == Vector(1, 2, 3)
    assert scene.light.brightness == 0.5


def test_parse_error_is_value_error():
    parser = SceneParser()
    with pytest.raises(ValueError):
        parser.finish()


def test_incremental_parser():
    parser = SceneParser()
    for line in _lines():
        parser.parse_line(line)
    assert parser.finish().camera.fov == 70


def test_check_filename():
    assert check_filename("scene.rt") == "scene.rt"
    with pytest.raises(ParseError, match=r"\.rt"):
        check_filename("scene.txt")


def test_load_scene(tmp_path):
    path = tmp_path / "scene.rt"
    path.write_text(VALID, encoding="utf-8")
    scene = load_scene(path)
    assert scene.cylinders[0].height == 21.42
    assert scene == parse_scene(_lines())


def test_load_scene_wrong_suffix(tmp_path):
    path = tmp_path / "scene.txt"
    path.write_text(VALID, encoding="utf-8")
    with pytest.raises(ParseError):
        load_scene(path)


def test_load_scene_missing_file(tmp_path):
    with pytest.raises(FileNotFoundError):
        load_scene(tmp_path / "absent.rt")