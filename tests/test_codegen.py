import pytest
from turbo_editor.codegen import (
    CodeGenerator, generate_turbo_code, format_number, format_color,
    register_emitter, get_emitter, UNIMPLEMENTED,
)
from turbo_editor.codegen import emitters
from turbo_editor.config import GeneratorConfig
from turbo_editor.scene import (
    create_scene, NodeType, StringValue, NumberValue, ColorValue, BooleanValue,
)


def test_empty_scene():
    scene = create_scene("Empty")
    assert generate_turbo_code(scene) == "turbo::go! {\n}\n"


def test_demo_scene():
    scene = create_scene("Demo")
    r = scene.add_node(scene.root_id, "Bg", NodeType.RECTANGLE)
    scene.set_property(r, "color", ColorValue(0x00FF00FF))
    s = scene.add_node(scene.root_id, "Hero", NodeType.SPRITE)
    scene.set_property(s, "path", StringValue("hero.png"))

    assert generate_turbo_code(scene) == (
        "turbo::go! {\n"
        "    rect!(x = 0, y = 0, w = 100, h = 100, color = 0x00FF00FF, border_radius = 0);\n"
        '    sprite!("hero.png", x = 0, y = 0, w = 100, h = 100);\n'
        "}\n"
    )


def test_children_follow_insertion_order_and_nest():
    scene = create_scene("Nested")
    group = scene.add_node(scene.root_id, "Group", NodeType.CONTAINER)
    panel = scene.add_node(group, "Panel", NodeType.RECTANGLE)
    scene.set_property(panel, "border_radius", NumberValue(4.5))
    icon = scene.add_node(panel, "Icon", NodeType.SPRITE)
    scene.set_property(icon, "path", StringValue("icon.png"))
    scene.set_property(icon, "x", NumberValue(-8))
    scene.add_node(panel, "Dot", NodeType.CIRCLE)
    scene.add_node(scene.root_id, "Caption", NodeType.TEXT)

    assert generate_turbo_code(scene) == (
        "turbo::go! {\n"
        "    rect!(x = 0, y = 0, w = 100, h = 100, color = 0xFFFFFFFF, border_radius = 4.5);\n"
        '        sprite!("icon.png", x = -8, y = 0, w = 100, h = 100);\n'
        "        // Unimplemented node type: Circle\n"
        "    // Unimplemented node type: Text\n"
        "}\n"
    )


def test_unimplemented_type_still_visits_children():
    scene = create_scene("Paths")
    path = scene.add_node(scene.root_id, "Outline", NodeType.PATH)
    inner = scene.add_node(path, "Inner", NodeType.SPRITE)
    scene.add_node(inner, "Deeper", NodeType.RECTANGLE)

    lines = generate_turbo_code(scene).splitlines()
    assert lines[1] == "    // Unimplemented node type: Path"
    assert lines[2].startswith("        sprite!(")
    assert lines[3].startswith("            rect!(")


def test_append_order_not_id_order():
    ids = iter(["root", "z", "m", "a"])
    from turbo_editor.config import SceneConfig
    scene = create_scene("Order", config=SceneConfig(id_factory=lambda: next(ids)))
    for path in ("first.png", "second.png", "third.png"):
        sid = scene.add_node(scene.root_id, path, NodeType.SPRITE)
        scene.set_property(sid, "path", StringValue(path))

    lines = generate_turbo_code(scene).splitlines()[1:-1]
    assert [line.split('"')[1] for line in lines] == ["first.png", "second.png", "third.png"]


def test_mismatched_property_uses_default():
    scene = create_scene("Fallback")
    r = scene.add_node(scene.root_id, "R", NodeType.RECTANGLE)
    scene.set_property(r, "color", NumberValue(3))
    scene.set_property(r, "width", BooleanValue(True))
    scene.remove_property(r, "x")

    assert "rect!(x = 0, y = 0, w = 100, h = 100, color = 0xFFFFFFFF, border_radius = 0);" \
        in generate_turbo_code(scene)


def test_generation_is_deterministic_and_pure():
    scene = create_scene("Same")
    r = scene.add_node(scene.root_id, "R", NodeType.RECTANGLE)
    scene.add_node(r, "S", NodeType.SPRITE)
    before = scene.to_dict()
    revision = scene.revision

    assert generate_turbo_code(scene) == generate_turbo_code(scene)
    assert scene.to_dict() == before
    assert scene.revision == revision


def test_snapshot_is_isolated_from_later_edits():
    scene = create_scene("Snap")
    scene.add_node(scene.root_id, "S", NodeType.SPRITE)
    snapshot = scene.snapshot()
    expected = generate_turbo_code(snapshot)

    scene.add_node(scene.root_id, "R", NodeType.RECTANGLE)

    assert generate_turbo_code(snapshot) == expected
    assert generate_turbo_code(scene) != expected


def test_deep_tree_generates_without_recursion():
    scene = create_scene("Deep")
    parent = scene.root_id
    for i in range(3000):
        parent = scene.add_node(parent, f"G{i}", NodeType.CONTAINER)
    scene.add_node(parent, "Leaf", NodeType.SPRITE)

    assert generate_turbo_code(scene).splitlines()[1] == \
        '    sprite!("default", x = 0, y = 0, w = 100, h = 100);'


def test_custom_config():
    scene = create_scene("Cfg")
    scene.add_node(scene.root_id, "S", NodeType.SPRITE)
    config = GeneratorConfig(indent="\t", base_depth=0)

    assert CodeGenerator(config).generate(scene) == (
        'turbo::go! {\nsprite!("default", x = 0, y = 0, w = 100, h = 100);\n}\n'
    )


def test_registered_emitter_replaces_fallback():
    assert get_emitter(NodeType.CIRCLE) is UNIMPLEMENTED
    try:
        @register_emitter(NodeType.CIRCLE)
        def emit_circle(node):
            return "circ!();"

        scene = create_scene("Circles")
        scene.add_node(scene.root_id, "C", NodeType.CIRCLE)
        assert generate_turbo_code(scene).splitlines()[1] == "    circ!();"
    finally:
        emitters._EMITTERS.pop(NodeType.CIRCLE, None)


@pytest.mark.parametrize("value,expected", [
    (0.0, "0"),
    (100.0, "100"),
    (-3.0, "-3"),
    (1.5, "1.5"),
    (0.1, "0.1"),
    (1e-7, "0.0000001"),
    (1e21, "1000000000000000000000"),
    (-0.0, "-0"),
    (float("nan"), "NaN"),
    (float("inf"), "inf"),
    (float("-inf"), "-inf"),
])
def test_format_number(value, expected):
    assert format_number(value) == expected


def test_format_color():
    assert format_color(0xFFFFFFFF) == "0xFFFFFFFF"
    assert format_color(0xAB) == "0x000000AB"
