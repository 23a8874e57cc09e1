"""
Client library and command line tool for Linked Data Platform (LDP) servers.
"""
from setuptools import find_packages, setup
from ldp_webclient.version import __version__

dependencies = ['click',
                'rdflib>=6.0',
                'requests',
                'pyyaml']

test_dependencies = ['pytest',
                     'flake8']

setup(
    name='ldp-webclient',
    version=__version__,
    license='Apache',
    description='Client library and command line tool for Linked Data '
                'Platform (LDP) servers.',
    long_description=__doc__,
    packages=find_packages(exclude=['tests']),
    include_package_data=True,
    zip_safe=False,
    platforms='any',
    python_requires='>=3.7',
    install_requires=dependencies,
    extras_require={
        'test': test_dependencies,
    },
    entry_points={
        'console_scripts': [
            'ldp-client = ldp_webclient.cli:main',
        ],
    },
    classifiers=[
        # As from http://pypi.python.org/pypi?%3Aaction=list_classifiers
        # 'Development Status :: 1 - Planning',
        # 'Development Status :: 2 - Pre-Alpha',
        'Development Status :: 3 - Alpha',
        # 'Development Status :: 4 - Beta',
        # 'Development Status :: 5 - Production/Stable',
        'Environment :: Console',
        'Intended Audience :: Developers',
        'License :: OSI Approved :: Apache Software License',
        'Operating System :: OS Independent',
        'Programming Language :: Python',
        'Programming Language :: Python :: 3',
        'Topic :: Internet :: WWW/HTTP',
        'Topic :: Software Development :: Libraries :: Python Modules',
    ]
)
