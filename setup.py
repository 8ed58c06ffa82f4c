from setuptools import setup, find_packages


def get_version(filename):
    import ast
    version_ = None
    with open(filename) as f:
        for line in f:
            if line.startswith('__version__'):
                version_ = ast.parse(line).body[0].value.value
                break
        else:
            raise ValueError('No version found in %r.' % filename)
    if version_ is None:
        raise ValueError(filename)
    return version_


version = get_version(filename='src/memoizer/__init__.py')

setup(
        name='memoizer',
        version=version,

        description="Drop-in memoization for pure functions, "
                    "with an inspectable debug variant.",

        long_description="""
        memoize() wraps a function so that repeated calls with the same
        arguments return the remembered result. Arguments are keyed by
        their string form, joined with commas ("1,2,3").

        memoize_debug() does the same and exposes the cache and the number
        of actual invocations, warning once when a threshold is reached.
    """,

        keywords="memoize, cache, decorator, debugging",
        license="LGPL",

        classifiers=[
            'Development Status :: 5 - Production/Stable',
            'Intended Audience :: Developers',
            'Topic :: Software Development :: Libraries :: Python Modules',
            'License :: OSI Approved :: GNU Library or '
            'Lesser General Public License (LGPL)',
        ],

        package_dir={'': 'src'},
        packages=find_packages('src'),
        python_requires='>=3.10',
        install_requires=[
            'decorator>=5',
            'zuper-commons-z7',
        ],

        extras_require={
            'test': ['pytest'],
        },
)
