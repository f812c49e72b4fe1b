"""Setup script for Zen Gomoku package."""

from setuptools import setup, find_packages
import os

# Read README file
def read_readme():
    readme_path = os.path.join(os.path.dirname(__file__), 'README.md')
    if os.path.exists(readme_path):
        with open(readme_path, 'r', encoding='utf-8') as f:
            return f.read()
    return "Gomoku (Five in a Row) with an optional LLM opponent"

setup(
    name="zen-gomoku",
    version="1.0.0",
    author="Zen Gomoku Team",
    description="Gomoku (Five in a Row) with an optional LLM opponent",
    long_description=read_readme(),
    long_description_content_type="text/markdown",
    packages=find_packages(exclude=["tests", "tests.*"]),
    classifiers=[
        "Development Status :: 4 - Beta",
        "Intended Audience :: Developers",
        "License :: OSI Approved :: Apache Software License",
        "Operating System :: OS Independent",
        "Programming Language :: Python :: 3",
        "Programming Language :: Python :: 3.9",
        "Programming Language :: Python :: 3.10",
        "Programming Language :: Python :: 3.11",
        "Programming Language :: Python :: 3.12",
        "Topic :: Games/Entertainment :: Board Games",
        "Topic :: Scientific/Engineering :: Artificial Intelligence",
    ],
    python_requires=">=3.9",
    install_requires=[
        'openai>=1.0.0',
        'tenacity>=8.0.0',
    ],
    extras_require={
        'dev': [
            'pytest>=6.0',
            'pytest-asyncio>=0.21.0',
            'pytest-cov>=4.0',
            'httpx',
            'black>=22.0',
            'flake8>=5.0',
            'mypy>=1.0',
        ],
    },
    entry_points={
        'console_scripts': [
            'zen-gomoku=zen_gomoku.cli:run',
        ],
    },
    keywords=[
        'gomoku', 'five-in-a-row', 'board-game', 'ai', 'llm', 'openai', 'game-ai'
    ],
    include_package_data=True,
    zip_safe=False,
)
