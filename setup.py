from glob import glob
from setuptools import setup


TESTS_REQUIRE = [
    'pytest',
    'pytest-cov',
    'coverage',
    'flake8',
    'bandit',
    'mypy',
    'safety',
]


setup(
    name='bcalc',
    version='1.0.0',
    description='Basic infix calculator',
    install_requires=[
        'regex',
        'prompt_toolkit',
    ],
    packages=['bcalc'],
    package_dir={'': 'src'},
    include_package_data=True,
    zip_safe=False,
    classifiers=[
        "Programming Language :: Python :: 3",
    ],
    tests_require=TESTS_REQUIRE,
    extras_require={
        'test': TESTS_REQUIRE,
    },
    scripts=glob('bin/*'),
    license='ISC',
)
