import os
import re

from setuptools import find_packages, setup


def get_version():
    """
    read the version from the package without importing it (the dependencies may not be installed yet)
    """
    with open(os.path.join('src', 'fusion_filter', '__init__.py')) as fh:
        match = re.search(r"^__version__\s*=\s*['\"]([^'\"]+)['\"]", fh.read(), re.MULTILINE)
    return match.group(1)


def check_nonpython_dependencies():
    """
    check that the non-python dependencies have been installed.
    """
    import shutil

    command = 'blast_and_promiscuity_filter.pl'
    pth = shutil.which(command)
    if not pth:
        print(
            'WARNING: blast and promiscuity filter is required unless it is skipped. Missing executable: {}'.format(
                command
            )
        )
    else:
        print('Found: blast and promiscuity filter at', pth)


TEST_REQS = [
    'pytest',
    'pytest-cov',
]


INSTALL_REQS = [
    'mavis_config>=1.1.0, <2.0.0',
    'pandas>=1.1.5',
    'snakemake>=7.0.0',
]


setup(
    name='fusion_filter',
    version=get_version(),
    package_dir={'': 'src'},
    packages=find_packages(where='src'),
    package_data={'fusion_filter.schemas': ['config.json']},
    description='Filters and deduplicates candidate gene fusion calls from RNA-seq fusion detection',
    install_requires=INSTALL_REQS,
    extras_require={
        'test': TEST_REQS,
        'dev': ['black', 'flake8'] + TEST_REQS,
    },
    python_requires='>=3.8',
    entry_points={
        'console_scripts': [
            'fusion-filter = fusion_filter.main:main',
        ]
    },
)
check_nonpython_dependencies()
