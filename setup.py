import os

import setuptools

# Make sure that README.md decodes in environments that use the C locale
# (which implies ASCII), by explicitly giving the encoding.
with open(os.path.join(os.path.dirname(__file__), "README.md"), encoding="utf-8") as f:
    long_description = f.read()


setuptools.setup(
    name="textdlg",
    # MAJOR.MINOR.PATCH, per http://semver.org
    version="1.1.0",
    description="RPG-style typewriter dialogs for the terminal",
    long_description=long_description,
    long_description_content_type="text/markdown",
    author="textdlg contributors",
    keywords="terminal, dialog, typewriter, rpg, tui",
    license="ISC",
    py_modules=(
        "rawterm",
        "textdlg",
        "showdlg",
    ),
    entry_points={
        "console_scripts": ("showdlg = showdlg:main",)
    },
    extras_require={
        "test": ["pytest"],
    },
    # termios is required, so there's no Windows support
    python_requires=">=3.6",
    classifiers=[
        "Development Status :: 5 - Production/Stable",
        "Intended Audience :: Developers",
        "Environment :: Console",
        "Topic :: Terminals",
        "Topic :: Games/Entertainment :: Role-Playing",
        "License :: OSI Approved :: ISC License (ISCL)",
        "Operating System :: POSIX",
        "Programming Language :: Python :: 3",
        "Programming Language :: Python :: 3.6",
        "Programming Language :: Python :: 3.7",
        "Programming Language :: Python :: 3.8",
        "Programming Language :: Python :: 3.9",
        "Programming Language :: Python :: 3.10",
        "Programming Language :: Python :: 3.11",
        "Programming Language :: Python :: 3.12",
        "Programming Language :: Python :: Implementation :: CPython",
        "Programming Language :: Python :: Implementation :: PyPy",
    ],
)
