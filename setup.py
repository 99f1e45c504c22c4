import os
import sys

from setuptools import find_packages
from setuptools import setup

# If the Python version is too low, developers will get a strange error from the
# standard library modules that clouddatastore relies on.
_supported = True
if sys.version_info.major < 3:
    _supported = False
if sys.version_info.major == 3 and sys.version_info.minor < 10:
    _supported = False
if not _supported:
    raise RuntimeError('clouddatastore requires Python 3.10 or higher.')

_here = os.path.dirname(os.path.abspath(__file__))


def _version():
    # Read the version without importing the package, which needs its dependencies.
    namespace = {}
    with open(os.path.join(_here, 'src', 'clouddatastore', '_version.py')) as fh:
        exec(fh.read(), namespace)
    return namespace['__version__']


# Keep this file for "editable" installations with `pip install -e`.
setup(
    name='clouddatastore',
    version=_version(),
    description='Asynchronous Google Cloud Datastore client built on generated gRPC bindings.',
    license='Apache-2.0',
    classifiers=[
        'Development Status :: 3 - Alpha',
        'Framework :: AsyncIO',
        'Intended Audience :: Developers',
        'Programming Language :: Python :: 3',
        'Topic :: Database',
    ],
    python_requires='>=3.10',
    package_dir={'': 'src'},
    packages=find_packages(where='src'),
    package_data={'clouddatastore': ['_generated/_manifest.json', '_generated/**/*.pyi']},
    install_requires=[
        'googleapis-common-protos>=1.56',
        'google-auth>=2.0',
        'grpcio>=1.84',
        'protobuf>=7.35.1',
        'requests',
    ],
    extras_require={
        'protobuild': ['grpcio-tools>=1.84'],
        'test': ['grpcio-tools>=1.84', 'pytest>=7', 'pytest-asyncio>=0.21'],
    },
)
