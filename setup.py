from setuptools import setup, find_packages

setup(
    name="ascii-diagram",
    version="0.1.0",
    description="Axis-aligned rectangles and text labels rendered onto a character-cell canvas",
    author="Your Name",
    packages=find_packages(include=["ascii_diagram", "ascii_diagram.*"]),
    python_requires=">=3.8",
    install_requires=[
        "numpy>=1.21.0",
        "pyyaml>=5.4.0",
    ],
    extras_require={
        "dev": ["pytest>=6.2.0", "black>=21.0", "flake8>=3.9.0"],
    },
)
