from setuptools import setup, find_packages
import re
from pathlib import Path

_version_re = re.compile(r"^__version__\s*(?::\s*[\w\[\]]+)?\s*=\s*['\"]([^'\"]+)['\"]", re.M)


def file_getVersion(rel_path: str) -> str:
    """
    Retrieve the version string from the specified file.
    """
    version_file = Path(rel_path)
    if not version_file.exists():
        raise RuntimeError(f"Version file {rel_path} not found.")

    with open(version_file, 'r') as f:
        content = f.read()
        match = _version_re.search(content)
        if not match:
            raise RuntimeError(f"Could not find __version__ in {rel_path}")
        return match.group(1)


setup(
    name='patres',
    version=file_getVersion('patres/patres.py'),
    description='Ordered pattern-substitution resolver with glob capture tokens',
    author='FNNDSC',
    author_email='rudolph.pienaar@childrens.harvard.edu',
    url='https://github.com/FNNDSC/patres',
    packages=find_packages(include=['patres', 'patres.*']),
    python_requires='>=3.11',
    install_requires=[
        'click',
        'rich',
        'loguru',
        'pydantic>=2',
        'pydantic-settings',
    ],
    license='MIT',
    entry_points={
        'console_scripts': [
            'patres = patres.patres:main'
        ]
    },
    classifiers=[
        'License :: OSI Approved :: MIT License',
        'Programming Language :: Python :: 3',
        'Programming Language :: Python :: 3.11',
        'Programming Language :: Python :: 3.12',
        'Topic :: Software Development :: Libraries',
        'Topic :: Text Processing',
    ],
    extras_require={
        'none': [],
        'dev': [
            'pytest>=7.1'
        ]
    }
)
