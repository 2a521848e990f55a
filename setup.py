from setuptools import setup, find_packages

setup(
    name="tmux-fzf",
    version="1.0.0",
    packages=find_packages(exclude=["tests", "tests.*"]),
    description="Switch tmux sessions or move windows by fuzzy-picking a session with fzf.",
    long_description=open("README.md", encoding="utf-8").read(),
    long_description_content_type="text/markdown",
    python_requires=">=3.8",
    install_requires=[
        "pydantic>=2",
        "rich",
    ],
    extras_require={
        "test": ["pytest"],
    },
    entry_points={
        "console_scripts": [
            "tmux-fzf=tmux_fzf.cli:main",
        ]
    },
    classifiers=[
        "Programming Language :: Python :: 3",
        "Operating System :: POSIX",
        "Environment :: Console",
    ],
)
