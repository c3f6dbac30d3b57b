from setuptools import setup, find_packages

setup(
    name="dragcanvas",
    version="0.1.0",
    description="Un mini canevas glisser-déposer (rectangles, cercles) en PyQt5",
    author="Vous",
    packages=find_packages(exclude=["tests", "tests.*"]),
    python_requires=">=3.10",
    install_requires=[
        "PyQt5>=5.15"
    ],
    extras_require={
        "test": [
            "pytest>=6.0",
        ],
    },
    entry_points={
        "gui_scripts": [
            "dragcanvas = dragcanvas.__main__:main"
        ]
    },
    classifiers=[
        "Programming Language :: Python :: 3",
        "Framework :: PyQt5"
    ],
)
