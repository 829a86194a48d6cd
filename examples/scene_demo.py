# examples/scene_demo.py
"""
Scene Demo - builds a small scene and prints the generated Turbo program.

Run with:
    python examples/scene_demo.py
"""

import logging

from turbo_editor import EditorSession, NodeType, StringValue, ColorValue, NumberValue


def main():
    logging.basicConfig(level=logging.DEBUG, format="%(levelname)s %(name)s: %(message)s")

    session = EditorSession()
    scene = session.new_scene("Demo")

    bg = scene.add_node(scene.root_id, "Bg", NodeType.RECTANGLE)
    scene.set_property(bg, "color", ColorValue(0x00FF00FF))

    hero = scene.add_node(scene.root_id, "Hero", NodeType.SPRITE)
    scene.set_property(hero, "path", StringValue("hero.png"))
    scene.set_property(hero, "x", NumberValue(32))

    badge = scene.add_node(hero, "Badge", NodeType.CIRCLE)
    scene.set_property(badge, "x", NumberValue(4.5))

    print(session.generate_code(), end="")


if __name__ == "__main__":
    main()
