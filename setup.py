from setuptools import find_namespace_packages, setup

setup(
    name="reuse-me",
    version="0.1.0",
    packages=find_namespace_packages(where="src"),
    package_dir={"": "src"},
    install_requires=[
        "agithub",
        "aiofiles",
        "giturlparse",
        "license-expression",
        "pytz",
        "spdx-tools>=0.8",
        "typer",
    ],
    extras_require={
        "dev": [
            "pytest<9",
            "pytest-asyncio",
            "pytest-cov",
            "pytest-mock",
            "mypy",
            "black",
            "types-aiofiles",
            "types-pytz",
        ],
    },
    entry_points={
        "console_scripts": [
            "reuse-me=reuse_me.cli.main_cli:app",
        ],
    },
    author="Datadog, Inc.",
    description="Validates the REUSE compliance (SPDX copyright and license headers) of a repository",
    long_description=open("README.md").read(),
    long_description_content_type="text/markdown",
    classifiers=[
        "Programming Language :: Python :: 3",
        "Operating System :: OS Independent",
    ],
    python_requires=">=3.10",
)
