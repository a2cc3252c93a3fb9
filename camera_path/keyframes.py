"""
Keyframes - Camera path data model
Stage 1: Path Configuration
"""

import math
import numpy as np
import yaml
from dataclasses import dataclass, field
from pathlib import Path
from typing import List, Dict, Optional, Sequence


def _as_flag(value, name: str) -> bool:
    """Config flag that must be a real boolean"""
    if isinstance(value, (bool, np.bool_)):
        return bool(value)
    raise ValueError(f"{name} must be true or false, got {value!r}")


def _as_vector(value, name: str) -> np.ndarray:
    """Convert a config value to a read-only 3D vector"""
    try:
        vector = np.array(value, dtype=np.float64).reshape(-1)
    except (TypeError, ValueError):
        raise ValueError(f"{name} must be a list of 3 numbers, got {value!r}")

    if vector.shape != (3,) or not np.all(np.isfinite(vector)):
        raise ValueError(f"{name} must be a list of 3 finite numbers, got {value!r}")

    vector.setflags(write=False)
    return vector


@dataclass(frozen=True, eq=False)
class Keyframe:
    """
    Authored waypoint of a camera path

    Attributes:
        position: Camera position in world space
        look_at_offset: Offset from the sphere center the camera looks at
            once this keyframe is reached
        duration: Seconds to travel from the previous keyframe to this one
    """
    position: np.ndarray
    look_at_offset: np.ndarray = field(default_factory=lambda: np.zeros(3))
    duration: float = 1.0

    def __post_init__(self):
        object.__setattr__(self, 'position', _as_vector(self.position, 'position'))
        object.__setattr__(self, 'look_at_offset',
                           _as_vector(self.look_at_offset, 'look_at_offset'))

        try:
            duration = float(self.duration)
        except (TypeError, ValueError):
            raise ValueError(f"duration must be a number, got {self.duration!r}")
        if not math.isfinite(duration) or duration < 0:
            raise ValueError(f"duration must be a non-negative number, got {self.duration!r}")
        object.__setattr__(self, 'duration', duration)

    @classmethod
    def from_dict(cls, data: Dict) -> 'Keyframe':
        """
        Build a keyframe from a config entry

        Args:
            data: Dict with position, look_at_offset (optional) and duration

        Returns:
            Keyframe: Parsed keyframe
        """
        if not isinstance(data, dict):
            raise ValueError(f"Keyframe entry must be a mapping, got {data!r}")
        if 'position' not in data:
            raise ValueError(f"Keyframe entry is missing 'position': {data!r}")

        return cls(
            position=data['position'],
            look_at_offset=data.get('look_at_offset', [0.0, 0.0, 0.0]),
            duration=data.get('duration', 1.0)
        )

    def to_dict(self) -> Dict:
        return {
            'position': self.position.tolist(),
            'look_at_offset': self.look_at_offset.tolist(),
            'duration': self.duration
        }


class CameraPath:
    """Ordered keyframes around a fixed sphere center"""

    def __init__(self, keyframes: Sequence[Keyframe],
                 sphere_center: Sequence[float] = (0.0, 0.0, 0.0),
                 loop_path: bool = True,
                 trigger_key: str = 'space',
                 snap_on_finish: bool = False):
        """
        Initialize camera path

        Args:
            keyframes: Keyframes in playback order
            sphere_center: Reference point for directions and look offsets
            loop_path: Wrap to the first segment after the last one
            trigger_key: Key that starts playback
            snap_on_finish: Write the final pose when a non-looping path ends
        """
        self.keyframes: List[Keyframe] = list(keyframes)
        self.sphere_center = _as_vector(sphere_center, 'sphere_center')
        self.loop_path = _as_flag(loop_path, 'loop_path')
        self.trigger_key = str(trigger_key)
        self.snap_on_finish = _as_flag(snap_on_finish, 'snap_on_finish')

    def __len__(self):
        return len(self.keyframes)

    def __getitem__(self, index: int) -> Keyframe:
        return self.keyframes[index]

    @property
    def is_playable(self) -> bool:
        """Interpolation needs at least two keyframes"""
        return len(self.keyframes) >= 2

    @property
    def total_duration(self) -> float:
        """
        Length of one pass through the path in seconds

        The last segment returns to the first keyframe, so every
        keyframe's duration is used once.
        """
        if not self.is_playable:
            return 0.0
        return float(sum(kf.duration for kf in self.keyframes))

    def segment(self, index: int):
        """Return (current, next) keyframes of the segment starting at index"""
        count = len(self.keyframes)
        return self.keyframes[index], self.keyframes[(index + 1) % count]

    @classmethod
    def from_config(cls, config: Dict) -> 'CameraPath':
        """
        Build a camera path from the camera_path config section

        Args:
            config: Configuration from config.yaml (camera_path section)

        Returns:
            CameraPath: Validated camera path
        """
        config = config or {}

        entries = config.get('keyframes')
        use_defaults = _as_flag(config.get('use_default_keyframes', False), 'use_default_keyframes')
        if use_defaults or entries is None:
            from camera_path.default_path import default_keyframes
            keyframes = default_keyframes()
        else:
            if not isinstance(entries, list):
                raise ValueError(f"keyframes must be a list, got {type(entries).__name__}")
            keyframes = []
            for idx, entry in enumerate(entries):
                try:
                    keyframes.append(Keyframe.from_dict(entry))
                except ValueError as e:
                    raise ValueError(f"Invalid keyframe #{idx}: {e}") from e

        return cls(
            keyframes,
            sphere_center=config.get('sphere_center', [0.0, 0.0, 0.0]),
            loop_path=config.get('loop_path', True),
            trigger_key=config.get('trigger_key', 'space'),
            snap_on_finish=config.get('snap_on_finish', False)
        )

    def describe(self) -> str:
        """Human-readable summary"""
        lines = [
            f"Keyframes: {len(self.keyframes)}",
            f"Sphere center: {self.sphere_center.tolist()}",
            f"Loop: {self.loop_path}",
            f"Trigger key: {self.trigger_key}",
            f"Total duration: {self.total_duration:.2f}s",
        ]
        for idx, kf in enumerate(self.keyframes):
            lines.append(
                f"  [{idx}] position={kf.position.tolist()} "
                f"lookAtOffset={kf.look_at_offset.tolist()} duration={kf.duration:g}s"
            )
        return "\n".join(lines)


def load_config(config_path: str) -> Dict:
    """
    Load YAML configuration

    Args:
        config_path: Path to config.yaml

    Returns:
        Dict: Parsed configuration (empty dict for an empty file)
    """
    config_path = Path(config_path)
    if not config_path.exists():
        raise FileNotFoundError(f"Config file not found: {config_path}")

    with open(config_path, 'r') as f:
        config = yaml.safe_load(f)

    if config is None:
        return {}
    if not isinstance(config, dict):
        raise ValueError(f"Config root must be a mapping: {config_path}")

    print(f"Loaded config from {config_path}")
    return config


def load_path(config_path: str, section: Optional[str] = 'camera_path') -> CameraPath:
    """Load config.yaml and build the camera path from one of its sections"""
    config = load_config(config_path)
    return CameraPath.from_config(config.get(section, {}) if section else config)
