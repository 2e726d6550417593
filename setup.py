"""
Setup script for the SOOS SAST Docker entrypoint.
"""

from setuptools import setup, find_packages
import os

# Read the README
readme_path = os.path.join(os.path.dirname(__file__), 'README.md')
if os.path.exists(readme_path):
    with open(readme_path, 'r', encoding='utf-8') as f:
        long_description = f.read()
else:
    long_description = "Container entrypoint that runs a SARIF generator and forwards results to SOOS SAST."

setup(
    name="soos-sast-docker",
    version="1.0.0",
    author="SOOS",
    author_email="support@soos.io",
    description="Run Semgrep, Opengrep, Gitleaks or SonarQube exports and report the SARIF to SOOS SAST",
    long_description=long_description,
    long_description_content_type="text/markdown",
    url="https://github.com/soos-io/soos-sast-docker",
    packages=find_packages(exclude=["tests", "tests.*"]),
    python_requires=">=3.8",
    install_requires=[
        "pyyaml>=6.0",
        "rich>=13.0",
    ],
    extras_require={
        "dev": [
            "pytest>=7.0",
            "pytest-cov>=4.0",
            "black>=23.0",
            "mypy>=1.0",
            "ruff>=0.1.0",
        ],
    },
    entry_points={
        "console_scripts": [
            "soos-sast-docker=soos_sast_docker.cli:main",
        ],
    },
    classifiers=[
        "Development Status :: 4 - Beta",
        "Environment :: Console",
        "Intended Audience :: Developers",
        "License :: OSI Approved :: MIT License",
        "Operating System :: POSIX :: Linux",
        "Programming Language :: Python :: 3",
        "Programming Language :: Python :: 3.8",
        "Programming Language :: Python :: 3.9",
        "Programming Language :: Python :: 3.10",
        "Programming Language :: Python :: 3.11",
        "Programming Language :: Python :: 3.12",
        "Topic :: Security",
        "Topic :: Software Development :: Quality Assurance",
    ],
    keywords="security, sast, sarif, semgrep, gitleaks, opengrep, sonarqube, soos",
    project_urls={
        "Bug Reports": "https://github.com/soos-io/soos-sast-docker/issues",
        "Source": "https://github.com/soos-io/soos-sast-docker",
    },
)
