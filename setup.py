from setuptools import setup, find_packages

setup(
    name="video-trimmer",
    version="0.1.0",
    description="Trim videos by typed start/end timestamps without re-encoding",
    packages=find_packages(exclude=["tests", "tests.*"]),
    install_requires=[
        "moviepy>=2.0.0",
        "pyyaml>=6.0",
    ],
    extras_require={
        "test": ["pytest>=7.0"],
    },
    python_requires=">=3.8",
    entry_points={
        "console_scripts": [
            "video-trimmer=video_trimmer.cli:main",
        ],
    },
)
