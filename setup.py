from setuptools import setup

setup(
    name='keymap-lang',
    version='0.1.0',
    description='Lexer and parser for the keymap configuration language',
    author='keymaplang contributors',
    package_dir={'': 'src'},
    packages=['keymaplang', 'keymaplang.parser', 'keymaplang.cli'],
    include_package_data=True,
    python_requires='>=3.8',
    install_requires=[
        'click>=7.0',
        'rich>=10.0'
    ],
    extras_require={
        'test': ['pytest>=7.0'],
    },
    entry_points={
        'console_scripts': [
            'kml = keymaplang.cli.main:cli'
        ]
    },
    classifiers=[
        'Programming Language :: Python :: 3',
    ],
)
