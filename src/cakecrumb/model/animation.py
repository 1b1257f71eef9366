# SPDX-License-Identifier: MIT

from typing import Literal, Optional, TypedDict

from cakecrumb.model.entity_id import EntityId

AnimationType = Literal["eat", "rot"]


class AnimationSignal(TypedDict):
    type: Optional[AnimationType]
    task_id: Optional[EntityId]
