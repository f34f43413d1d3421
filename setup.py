"""安装脚本"""

from setuptools import find_packages, setup

setup(
    name="autodocker",
    version="0.1.0",
    packages=find_packages(exclude=["tests", "tests.*"]),
    include_package_data=True,
    install_requires=[
        "typer[all]>=0.9.0",
        "click>=8.0.0",
        "loguru>=0.7.0",
        "python-dotenv>=1.0.0",
    ],
    extras_require={
        "test": [
            "pytest>=7.0.0",
        ],
    },
    entry_points={
        "console_scripts": [
            "autodocker=autodocker.cli:main",
            "autodocker-install=autodocker.install:main",
        ],
    },
    python_requires=">=3.8",
    description="容器引擎命令拦截工具，为目录提供自动构建、清理、推送和运行命令",
    long_description=open("README.md", encoding="utf-8").read(),
    long_description_content_type="text/markdown",
    keywords="docker, container, tags, cli, wrapper",
    classifiers=[
        "Development Status :: 3 - Alpha",
        "Intended Audience :: Developers",
        "Intended Audience :: System Administrators",
        "Topic :: Software Development :: Build Tools",
        "Topic :: Utilities",
        "License :: OSI Approved :: MIT License",
        "Programming Language :: Python :: 3",
        "Programming Language :: Python :: 3.8",
        "Programming Language :: Python :: 3.9",
        "Programming Language :: Python :: 3.10",
        "Programming Language :: Python :: 3.11",
        "Operating System :: POSIX",
    ],
)
