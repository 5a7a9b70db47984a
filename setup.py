from setuptools import setup, find_packages

setup(
    name="yambo-dice",
    version="0.1.0",
    description="Dice panel core for a Yam (Yahtzee-style) dice game: holds, rolls and combinations",
    author="Tim Vermaelen",
    python_requires=">=3.11",
    packages=find_packages(include=["yambo", "yambo.*"]),
    install_requires=[
        "colorama>=0.4.6",
        "jsonschema>=4.20.0",
        "python-dotenv>=1.0.0",
    ],
    extras_require={
        "dev": [
            "pytest>=7.4.0",
            "pytest-cov>=4.1.0",
            "black>=23.12.0",
            "mypy>=1.7.0",
            "pylint>=3.0.0",
        ]
    },
)
