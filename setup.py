from __future__ import annotations

from setuptools import find_packages, setup  # type: ignore


setup(
    name="roster",
    version="0.1.0",
    description="Minimal in-memory user registry served over HTTP",
    python_requires=">=3.10",
    package_dir={"": "src"},
    packages=find_packages(where="src"),
    install_requires=[
        "fastapi",
        "uvicorn",
        "httpx",
    ],
    extras_require={
        "test": ["pytest"],
    },
    entry_points={
        "console_scripts": [
            "roster = roster.__main__:main",
        ],
    },
)
