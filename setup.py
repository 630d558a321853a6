from glob import glob
from setuptools import setup


setup(
    name='deskcalc',
    use_scm_version={
        # Building from a tarball or export without git metadata
        'fallback_version': '0.1.0',
    },
    description='Desk calculator engine',
    install_requires=[
        'regex',
        'prompt_toolkit',
    ],
    packages=['deskcalc'],
    package_dir={'': 'src'},
    include_package_data=True,
    zip_safe=False,
    python_requires='>=3.7',
    classifiers=[
        "Programming Language :: Python :: 3",
    ],
    setup_requires=[
        'setuptools_scm',
    ],
    extras_require={
        'test': [
            'pytest',
            'pytest-cov',
            'coverage',
            'flake8',
        ],
    },
    scripts=glob('bin/*'),
    license='ISC',
)
