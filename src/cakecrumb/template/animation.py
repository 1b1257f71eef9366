# SPDX-License-Identifier: MIT

from cakecrumb.model.animation import AnimationSignal


def get_animation_template() -> AnimationSignal:
    return {"type": None, "task_id": None}
