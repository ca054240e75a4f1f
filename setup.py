from setuptools import find_packages, setup

package_name = 'field_coverage'

setup(
    name=package_name,
    version='0.1.0',
    packages=find_packages(exclude=['tests', 'tests.*']),
    python_requires='>=3.8',
    install_requires=['setuptools', 'PyYAML'],
    zip_safe=True,
    maintainer='Overrack Robotics',
    maintainer_email='support@overrack.ai',
    description='Boustrophedon coverage path preview for operator-selected field polygons.',
    license='Apache-2.0',
    extras_require={'test': ['pytest']},
    entry_points={
        'console_scripts': [
            'field-coverage = field_coverage.cli:main',
        ],
    },
)
