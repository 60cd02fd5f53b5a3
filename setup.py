"""Packaging for StudyPlanner.

Install for development:
    pip install -e ".[test]"

Build a macOS .app bundle:
    pip install py2app
    python setup.py py2app
"""

import sys

from setuptools import setup, find_packages

APP = ["main.py"]
OPTIONS = {
    "argv_emulation": False,
    "iconfile": None,
    "plist": {
        "CFBundleName": "StudyPlanner",
        "CFBundleDisplayName": "StudyPlanner",
        "CFBundleIdentifier": "com.studyplanner.app",
        "CFBundleVersion": "0.1.0",
        "CFBundleShortVersionString": "0.1.0",
        "NSHighResolutionCapable": True,
        "LSMinimumSystemVersion": "13.0",
    },
}

app_kwargs = {}
if "py2app" in sys.argv:
    app_kwargs = {
        "app": APP,
        "data_files": [],
        "options": {"py2app": OPTIONS},
        "setup_requires": ["py2app"],
    }

setup(
    name="StudyPlanner",
    version="0.1.0",
    packages=find_packages(include=["studyplanner", "studyplanner.*"]),
    python_requires=">=3.10",
    install_requires=[
        "PyQt6>=6.4",
        "SQLAlchemy>=2.0",
    ],
    extras_require={
        "test": ["pytest>=7"],
    },
    entry_points={
        "gui_scripts": ["studyplanner = studyplanner.__main__:main"],
    },
    **app_kwargs,
)
