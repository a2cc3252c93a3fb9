"""
Default Path - Cinematic keyframes around the sphere center
Approach from afar, orbit the rings, depart and return to the start
"""

from typing import List

from camera_path.keyframes import Keyframe, CameraPath


def default_keyframes() -> List[Keyframe]:
    """
    Eight keyframes forming a looping three-phase path

    Assumes the ring plane is Y=0 and the center sits at the origin.

    Returns:
        List[Keyframe]: Keyframes in playback order
    """
    return [
        # Phase 1: swoop in from afar, pitch straight at the center
        Keyframe(position=[400.0, 150.0, 600.0], look_at_offset=[0.0, 0.0, 0.0], duration=15.0),
        Keyframe(position=[250.0, 75.0, 350.0], look_at_offset=[0.0, 0.0, 0.0], duration=12.0),

        # Phase 2: drop to ring level and circle at an angle
        Keyframe(position=[100.0, 20.0, 150.0], look_at_offset=[0.0, -5.0, 0.0], duration=10.0),
        Keyframe(position=[-120.0, 15.0, 80.0], look_at_offset=[0.0, -7.0, 0.0], duration=12.0),
        Keyframe(position=[-50.0, 10.0, -100.0], look_at_offset=[0.0, -3.0, 0.0], duration=10.0),
        Keyframe(position=[80.0, 10.0, -50.0], look_at_offset=[0.0, -5.0, 0.0], duration=8.0),

        # Phase 3: zoom out, ascending, back to the first position
        Keyframe(position=[300.0, 100.0, -400.0], look_at_offset=[0.0, 0.0, 0.0], duration=15.0),
        Keyframe(position=[400.0, 150.0, 600.0], look_at_offset=[0.0, 0.0, 0.0], duration=15.0),
    ]


def default_path() -> CameraPath:
    """Default keyframes as a looping path centered at the origin"""
    return CameraPath(default_keyframes(), sphere_center=(0.0, 0.0, 0.0), loop_path=True)


if __name__ == "__main__":
    # Testing
    path = default_path()
    print(path.describe())
