# Copyright (c) 2024, RoboVerse community
# SPDX-License-Identifier: BSD-3-Clause


from setuptools import setup
from setuptools import find_packages

package_name = 'spatial_kernel'

setup(
    name=package_name,
    version='0.0.0',
    packages=find_packages(exclude=['test']),
    install_requires=['setuptools', 'numpy'],
    extras_require={
        'test': ['pytest'],
    },
    tests_require=['pytest'],
    zip_safe=True,
    description='Minimal 3D vector and quaternion kernel for rotation composition',
    license='BSD-3-Clause',
    entry_points={
        'console_scripts': [
            'spatial_kernel_demo = spatial_kernel.main:main',
        ],
    },
)
