from setuptools import setup, find_packages

setup(
    name="music-manager",
    version="0.1.0",
    packages=find_packages(exclude=["tests", "tests.*"]),
    include_package_data=True,
    install_requires=[
        "typer",
        "rich",
        "pymonad>=2.4.0",
        "toolz",
    ],
    extras_require={
        "dev": [
            "pytest",
            "pytest-mock",
            "ruff",
            "setuptools",
            "wheel",
        ]
    },
    entry_points={
        "console_scripts": [
            "music-manager = music_manager.cli:app",
        ],
    },
    description="An interactive terminal tool to manage playlists.",
    long_description=open("README.adoc", encoding="utf-8").read(),
    long_description_content_type="text/plain",
    classifiers=[
        "Programming Language :: Python :: 3",
        "License :: OSI Approved :: MIT License",
        "Operating System :: OS Independent",
        "Environment :: Console",
        "Intended Audience :: End Users/Desktop",
        "Topic :: Multimedia :: Sound/Audio",
    ],
    python_requires=">=3.8",
)
