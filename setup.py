from setuptools import setup, find_packages

setup(
    name='PySearchParams',
    version='1.0.0',

    author='Dean Gardiner',
    author_email='me@dgardiner.net',

    description='Query string (url search params) encoding and decoding',
    packages=find_packages(exclude=['tests', 'tests.*']),
    platforms='any',
    python_requires='>=3.7',

    install_requires=[],

    extras_require={
        'test': [
            'pytest',
            'hypothesis'
        ]
    },

    classifiers=[
        'Development Status :: 4 - Beta',
        'Intended Audience :: Developers',
        'Operating System :: OS Independent',
        'Programming Language :: Python',
        'Programming Language :: Python :: 3'
    ],
)
