# Copyright (c) 2024, RoboVerse community
# SPDX-License-Identifier: BSD-3-Clause

"""
Rotation demo entry point.
Builds p, rotates it by +angle and -angle about an axis and prints both states.
"""

import argparse
import logging
import sys
from typing import List, Optional

from .application.services import RotationService
from .domain.entities import DemoConfig

logging.basicConfig(level=logging.WARN)
logger = logging.getLogger(__name__)
logger.setLevel(logging.INFO)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="Compose q1 * p * q2 for an axis-angle rotation pair."
    )
    parser.add_argument('--angle', help='Rotation angle in degrees (default: $SPATIAL_DEMO_ANGLE or 45).')
    parser.add_argument('--axis', help='Rotation axis as x,y,z (default: $SPATIAL_DEMO_AXIS or 1,0,0).')
    parser.add_argument('--point', help='Quaternion to rotate as w,x,y,z (default: $SPATIAL_DEMO_POINT or 0,0,1,1).')
    return parser


def main(argv: Optional[List[str]] = None) -> int:
    args = build_parser().parse_args(argv)

    try:
        config = DemoConfig.from_env(angle_deg=args.angle, axis=args.axis, point=args.point)
    except ValueError as e:
        logger.error(f"Invalid demo parameters: {e}")
        return 1

    p, result = RotationService(config).run()
    print(f"{p} {config.angle_deg:g}deg > {result}")
    return 0


if __name__ == '__main__':
    sys.exit(main())
