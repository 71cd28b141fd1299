from setuptools import setup, find_packages

setup(
    name='rotcalc',
    version='1.0.0',
    description='Convert 3D rotations between Euler angles, quaternions, axis/angle, and rotation matrices',
    packages=find_packages(include=['rotcalc', 'rotcalc.*']),
    python_requires='>=3.11',
    install_requires=['numpy'],
    extras_require={'test': ['pytest', 'scipy']},
    entry_points={'console_scripts': ['rotcalc=rotcalc.scripts.rotcalc_cli:main']},
)
