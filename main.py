"""
Main script for running the spherical camera path animator
"""

import sys
import argparse
from pathlib import Path

from camera_path.keyframes import CameraPath, load_config
from camera_path.default_path import default_path
from camera_path.path_animator import PathAnimator
from camera_path.camera_transform import CameraTransform
from camera_path.playback import ScriptedKeyboard, run_playback, save_frames


def main(argv=None) -> int:
    """Main function"""
    parser = argparse.ArgumentParser(description='Spherical Camera Path Animator')
    parser.add_argument('--config', type=str, default='configs/config.yaml', help='Path to config file')
    parser.add_argument('--task', type=str, choices=['simulate', 'info', 'defaults'],
                        default='simulate', help='Task to perform')
    parser.add_argument('--output', type=str, default='output', help='Output directory')
    parser.add_argument('--duration', type=float, help='Simulated seconds (overrides config)')
    parser.add_argument('--fps', type=float, help='Frame rate (overrides config)')

    args = parser.parse_args(argv)

    if args.task == 'defaults':
        print(default_path().describe())
        return 0

    # Load configuration
    try:
        config = load_config(args.config)
        path = CameraPath.from_config(config.get('camera_path', {}))
    except (FileNotFoundError, ValueError) as e:
        print(f"Error: {e}")
        return 1

    print("=" * 60)
    print(f"Task: {args.task}")
    print("=" * 60)
    print(path.describe())

    if args.task == 'info':
        return 0

    if not path.is_playable:
        print("Need at least 2 keyframes for playback, nothing to simulate")
        return 0

    playback_config = config.get('playback', {})
    fps = args.fps or playback_config.get('fps', 60)
    duration = args.duration or playback_config.get('duration', path.total_duration)

    try:
        if 'key_presses' in playback_config:
            keyboard = ScriptedKeyboard.from_config(playback_config['key_presses'])
        else:
            keyboard = None

        camera = CameraTransform()
        animator = PathAnimator(path, camera)
        frames = run_playback(animator, duration, fps=fps, keyboard=keyboard,
                              show_progress=playback_config.get('show_progress', True))
    except ValueError as e:
        print(f"Error: {e}")
        return 1

    output_dir = Path(args.output)
    output_name = playback_config.get('output_name', 'camera_path_frames.json')
    save_frames(frames, output_dir / output_name, metadata={
        'fps': fps,
        'duration': duration,
        **animator.info()
    })

    print(f"\n[OK] Final camera position: {camera.position.tolist()}")
    print(f"  Camera updates: {camera.updates}")
    print("\n" + "=" * 60)
    print("Done!")
    return 0


if __name__ == "__main__":
    sys.exit(main())
