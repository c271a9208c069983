import logging

from doublef import AnimationConfig, run

CANVAS_SIZE = (1200, 400)


if __name__ == "__main__":
    logging.basicConfig(level=logging.DEBUG)
    run(
        AnimationConfig(node_count=5, line_count=3, fore_color="#D81B60"),
        canvas_size=CANVAS_SIZE,
    )
