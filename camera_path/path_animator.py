"""
Path Animator - Moving the camera along spherical keyframes
Stage 2: Playback
"""

import math
import numpy as np
from dataclasses import dataclass
from typing import Dict, Optional
from scipy.spatial.transform import Rotation

from camera_path.keyframes import CameraPath, Keyframe
from camera_path.spherical import interpolate_on_sphere, lerp
from camera_path.camera_transform import Pose, look_rotation


@dataclass
class PlaybackState:
    """Mutable playback position, owned by the animator"""
    current_keyframe_index: int = 0
    segment_time: float = 0.0
    is_moving: bool = False


def interpolate_pose(current: Keyframe, target: Keyframe, progress: float,
                     sphere_center: np.ndarray,
                     previous_rotation: Optional[Rotation] = None) -> Pose:
    """
    Camera pose between two keyframes

    Args:
        current: Keyframe the segment starts at
        target: Keyframe the segment ends at
        progress: Normalized segment time in [0, 1]
        sphere_center: Reference point for directions and look offsets
        previous_rotation: Used when the look direction is degenerate

    Returns:
        Pose: Interpolated position, look target and rotation
    """
    sphere_center = np.asarray(sphere_center, dtype=np.float64)

    position = interpolate_on_sphere(current.position, target.position, sphere_center, progress)
    look_target = sphere_center + lerp(current.look_at_offset, target.look_at_offset, progress)

    rotation = look_rotation(look_target - position)
    if rotation is None:
        rotation = previous_rotation if previous_rotation is not None else Rotation.identity()

    return Pose(position=position, look_target=look_target, rotation=rotation)


class PathAnimator:
    """Keyframe state machine driven by trigger events and elapsed time"""

    def __init__(self, path: CameraPath, sink=None):
        """
        Initialize path animator

        Args:
            path: Camera path (read-only during playback)
            sink: Host transform, any object with apply(pose)
        """
        self.path = path
        self.sink = sink

        self.state = PlaybackState()
        self.progress = 0.0
        self.last_pose: Optional[Pose] = None

    @property
    def is_moving(self) -> bool:
        return self.state.is_moving

    @property
    def current_segment(self):
        """(current, next) keyframes of the active segment, None if inert"""
        if not self.path.is_playable:
            return None
        return self.path.segment(self.state.current_keyframe_index)

    def trigger(self):
        """Restart playback from the first segment"""
        if not self.path.is_playable:
            return

        self.state.current_keyframe_index = 0
        self.state.segment_time = 0.0
        self.state.is_moving = True
        self.progress = 0.0

    def tick(self, delta_time: float, trigger_requested: bool = False) -> Optional[Pose]:
        """
        Advance playback by one frame

        Args:
            delta_time: Seconds since the last tick
            trigger_requested: Trigger key was pressed this frame

        Returns:
            Optional[Pose]: Pose written to the sink, None if nothing was written
        """
        if trigger_requested:
            self.trigger()

        if not self.state.is_moving or not self.path.is_playable:
            return None

        state = self.state
        count = len(self.path)
        current, target = self.path.segment(state.current_keyframe_index)

        state.segment_time += delta_time
        progress = self._segment_progress(state.segment_time, target.duration)

        if progress >= 1.0:
            finished_current, finished_target = current, target

            state.current_keyframe_index += 1
            if state.current_keyframe_index >= count:
                if self.path.loop_path:
                    state.current_keyframe_index = 0
                else:
                    state.current_keyframe_index = count - 1
                    state.is_moving = False
                    self.progress = 1.0
                    if self.path.snap_on_finish:
                        return self._emit(finished_current, finished_target, 1.0)
                    return None

            # Progress stays clamped at 1 for the new segment on this tick
            progress = 1.0
            state.segment_time = 0.0
            current, target = self.path.segment(state.current_keyframe_index)

        self.progress = progress
        return self._emit(current, target, progress)

    @staticmethod
    def _segment_progress(segment_time: float, duration: float) -> float:
        """Normalized segment time; zero duration or non-finite values complete the segment"""
        if duration <= 0.0:
            return 1.0
        progress = segment_time / duration
        if not math.isfinite(progress):
            return 1.0
        return progress

    def _emit(self, current: Keyframe, target: Keyframe, progress: float) -> Pose:
        previous_rotation = self.last_pose.rotation if self.last_pose is not None else None
        pose = interpolate_pose(current, target, progress, self.path.sphere_center, previous_rotation)

        self.last_pose = pose
        if self.sink is not None:
            self.sink.apply(pose)
        return pose

    def info(self) -> Dict:
        """
        Get information about the animator

        Returns:
            Dict: Path and playback summary
        """
        return {
            'keyframes': len(self.path),
            'total_duration': self.path.total_duration,
            'loop': self.path.loop_path,
            'playing': self.state.is_moving,
            'current_index': self.state.current_keyframe_index,
            'segment_time': self.state.segment_time,
            'progress': self.progress
        }
