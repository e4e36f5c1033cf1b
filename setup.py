from pathlib import Path

from setuptools import find_packages, setup

root = Path(__file__).parent
readme = root / "README.md"

setup(
    name="staticwire",
    version="0.1.0",
    description="Compile declarative UI components to framework-free HTML documents.",
    long_description=readme.read_text("utf-8") if readme.exists() else "",
    long_description_content_type="text/markdown",
    python_requires=">=3.9",
    package_dir={"": "src"},
    packages=find_packages("src"),
    package_data={
        "staticwire": ["templates/*.j2", "templates/error/*.html"],
    },
    install_requires=[
        "jinja2>=3.1",
        "rich>=13.0",
        "rich-click>=1.7",
        "starlette>=0.37",
        "uvicorn>=0.29",
    ],
    extras_require={
        "test": [
            "beautifulsoup4>=4.12",
            "click>=8.1",
            "httpx>=0.27",
            "pytest>=8.0",
        ],
    },
    entry_points={
        "console_scripts": [
            "staticwire=staticwire.cli.main:cli",
        ],
    },
    zip_safe=False,
)
