from setuptools import find_packages, setup

setup(
    name="arbor-cli",
    version="0.4.3",
    description="Declarative command trees with option scoping and dispatch.",
    author="Roland Thomas Jr",
    author_email="roland@rtj.dev",
    packages=find_packages(exclude=["tests", "tests.*"]),
    python_requires=">=3.10",
    install_requires=[
        "rich>=13",
        "prompt_toolkit>=3",
        "pydantic>=2",
        "python-json-logger>=3.1",
    ],
    extras_require={
        "test": ["pytest", "pytest-asyncio"],
    },
    entry_points={
        "console_scripts": ["arbor=arbor.__main__:main"],
    },
    classifiers=[
        "Programming Language :: Python :: 3",
        "License :: OSI Approved :: MIT License",
        "Development Status :: 3 - Alpha",
    ],
)
