"""
Playback - Driving the animator from a host loop
Stage 3: Simulation and trajectory export
"""

import json
import numpy as np
from pathlib import Path
from typing import List, Dict, Optional, Sequence, Tuple
from tqdm import tqdm

from camera_path.path_animator import PathAnimator
from camera_path.camera_transform import Pose


class FixedClock:
    """Constant frame time at a given frame rate"""

    def __init__(self, fps: float = 60.0):
        if fps <= 0:
            raise ValueError(f"fps must be positive, got {fps}")
        self.fps = float(fps)
        self.delta_time = 1.0 / self.fps
        self.frame = 0

    @property
    def time(self) -> float:
        return self.frame * self.delta_time

    def advance(self) -> float:
        """Step one frame and return its delta time"""
        self.frame += 1
        return self.delta_time


class ScriptedKeyboard:
    """
    Key presses at fixed times

    Reports each press once, in the frame whose interval contains it.
    """

    def __init__(self, presses: Sequence[Tuple[float, str]] = ()):
        """
        Args:
            presses: (time in seconds, key name) pairs
        """
        self.presses = sorted((float(t), str(key)) for t, key in presses)

    @classmethod
    def from_config(cls, entries: Optional[List]) -> 'ScriptedKeyboard':
        """
        Build from the playback.key_presses config list

        Entries are either {time, key} mappings or bare times for the
        default key.
        """
        presses = []
        for entry in entries or []:
            if isinstance(entry, dict):
                if 'time' not in entry:
                    raise ValueError(f"Key press entry is missing 'time': {entry!r}")
                presses.append((entry['time'], entry.get('key', 'space')))
            else:
                presses.append((entry, 'space'))
        return cls(presses)

    def was_pressed(self, key: str, start_time: float, end_time: float) -> bool:
        """True if key was pressed during [start_time, end_time)"""
        return any(start_time <= t < end_time and k == key for t, k in self.presses)


class RecordingSink:
    """Pose sink that keeps every written pose as a frame record"""

    def __init__(self):
        self.frames: List[Dict] = []
        self.frame = 0
        self.time = 0.0

    def apply(self, pose: Pose):
        record = {'frame': self.frame, 'time': round(self.time, 6)}
        record.update(pose.to_dict())
        self.frames.append(record)


def run_playback(animator: PathAnimator, duration: float, fps: float = 60.0,
                 keyboard: Optional[ScriptedKeyboard] = None,
                 show_progress: bool = True) -> List[Dict]:
    """
    Run the animator for a fixed time span

    Args:
        animator: Animator to drive (its sink is replaced by a recorder)
        duration: Simulated seconds
        fps: Frame rate of the host loop
        keyboard: Scripted input; defaults to one trigger press at t=0
        show_progress: Show a tqdm progress bar

    Returns:
        List[Dict]: Frame records with time, position, lookAt, forward, quaternion
    """
    clock = FixedClock(fps)
    if keyboard is None:
        keyboard = ScriptedKeyboard([(0.0, animator.path.trigger_key)])

    num_frames = int(np.ceil(duration * clock.fps))
    host_sink = animator.sink
    recorder = RecordingSink()
    animator.sink = recorder

    print(f"Simulating {duration:.2f}s at {clock.fps:g} FPS ({num_frames} frames)...")

    try:
        for _ in tqdm(range(num_frames), desc="Simulating frames", unit="frame",
                      disable=not show_progress):
            start_time = clock.time
            delta_time = clock.advance()
            pressed = keyboard.was_pressed(animator.path.trigger_key, start_time, clock.time)

            recorder.frame = clock.frame
            recorder.time = clock.time
            pose = animator.tick(delta_time, trigger_requested=pressed)

            if pose is not None and host_sink is not None:
                host_sink.apply(pose)
    finally:
        animator.sink = host_sink

    print(f"Recorded {len(recorder.frames)} poses, playing={animator.is_moving}")
    return recorder.frames


def save_frames(frames: List[Dict], output_path: str, metadata: Optional[Dict] = None):
    """Save recorded frames to JSON"""
    output_path = Path(output_path)
    output_path.parent.mkdir(parents=True, exist_ok=True)

    data = {'frames': frames}
    if metadata:
        data['metadata'] = metadata

    with open(output_path, 'w') as f:
        json.dump(data, f, indent=2)

    print(f"Saved {len(frames)} frames to {output_path}")
