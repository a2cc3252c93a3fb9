"""
Camera Transform - Pose output for the host camera
Converts look directions to rotations
"""

import numpy as np
from dataclasses import dataclass
from typing import Optional, Dict
from scipy.spatial.transform import Rotation

# Camera looks down local +Z with +Y up
CAMERA_FORWARD = np.array([0.0, 0.0, 1.0])
CAMERA_UP = np.array([0.0, 1.0, 0.0])
WORLD_UP = np.array([0.0, 1.0, 0.0])

LOOK_EPSILON = 1e-6


def look_rotation(forward: np.ndarray, up: np.ndarray = WORLD_UP) -> Optional[Rotation]:
    """
    Rotation that points the camera's forward axis along a direction

    Args:
        forward: Look direction (any length)
        up: Secondary reference axis

    Returns:
        Optional[Rotation]: None if forward has zero length
    """
    forward = np.asarray(forward, dtype=np.float64)
    forward_norm = np.linalg.norm(forward)
    if forward_norm < LOOK_EPSILON:
        return None
    forward = forward / forward_norm

    right = np.cross(up, forward)
    right_norm = np.linalg.norm(right)
    if right_norm < LOOK_EPSILON:
        # Looking straight along up: shortest arc from the camera axis
        rotation, _ = Rotation.align_vectors([forward], [CAMERA_FORWARD])
        return rotation
    right = right / right_norm

    camera_up = np.cross(forward, right)

    # Columns are the camera's local X, Y, Z axes in world space
    matrix = np.column_stack([right, camera_up, forward])
    return Rotation.from_matrix(matrix)


@dataclass
class Pose:
    """Camera pose written to the host transform"""
    position: np.ndarray
    look_target: np.ndarray
    rotation: Rotation

    @property
    def forward(self) -> np.ndarray:
        return self.rotation.apply(CAMERA_FORWARD)

    @property
    def up(self) -> np.ndarray:
        return self.rotation.apply(CAMERA_UP)

    def to_dict(self) -> Dict:
        return {
            'position': self.position.tolist(),
            'lookAt': self.look_target.tolist(),
            'forward': self.forward.tolist(),
            'quaternion': self.rotation.as_quat().tolist()
        }


class CameraTransform:
    """Host camera transform receiving poses from the animator"""

    def __init__(self, position=(0.0, 0.0, 0.0), rotation: Optional[Rotation] = None):
        self.position = np.array(position, dtype=np.float64)
        self.rotation = rotation if rotation is not None else Rotation.identity()
        self.updates = 0

    @property
    def forward(self) -> np.ndarray:
        return self.rotation.apply(CAMERA_FORWARD)

    def apply(self, pose: Pose):
        """Copy a pose into the transform"""
        self.position = np.array(pose.position, dtype=np.float64)
        self.rotation = pose.rotation
        self.updates += 1
