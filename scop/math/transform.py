"""
Положение объекта сцены: позиция, вращение, масштаб и «точка опоры».
"""

from dataclasses import dataclass, field

from scop.math.mat4 import Mat4
from scop.math.quat import Quat
from scop.math.vec3 import Vec3


@dataclass
class Transform:
    position: Vec3 = field(default_factory=Vec3)
    scale: Vec3 = field(default_factory=lambda: Vec3(1.0, 1.0, 1.0))
    rotation: Quat = field(default_factory=Quat)
    # сдвиг модели до вращения (например, −центр bounding box)
    origin: Vec3 = field(default_factory=Vec3)

    def model_matrix(self) -> Mat4:
        """T(position) · R · S · T(origin)."""
        return (
            Mat4.translate(*self.position.to_tuple())
            @ self.rotation.to_mat4()
            @ Mat4.scale(*self.scale.to_tuple())
            @ Mat4.translate(*self.origin.to_tuple())
        )

    def rotate_around_y(self, angle_deg: float) -> None:
        self.rotation = self.rotation * Quat.from_axis_angle([0, 1, 0], angle_deg)
