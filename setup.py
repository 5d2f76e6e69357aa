from setuptools import setup, find_packages

setup(
    name="sshconfgen",
    version="0.1.0",
    packages=find_packages(exclude=["tests", "tests.*"]),
    include_package_data=True,
    install_requires=[
        "click>=8.0",
        "pyobjc-framework-CoreWLAN; sys_platform == 'darwin'",
        "toml",
    ],
    extras_require={
        "test": ["pytest"],
    },
    entry_points={
        "console_scripts": [
            "sshconfgen=sshconfgen.cli:cli",
        ],
    },
    python_requires=">=3.10",
    author="sshconfgen Contributors",
    description="Network-aware SSH client config generator",
    long_description="Builds ~/.ssh/config from fragments, choosing local or remote sections based on the Wi-Fi network, gateway MAC address or reachable hosts.",
    classifiers=[
        "Development Status :: 4 - Beta",
        "Environment :: Console",
        "Intended Audience :: Developers",
        "License :: OSI Approved :: MIT License",
        "Operating System :: MacOS",
        "Operating System :: POSIX :: Linux",
        "Operating System :: Microsoft :: Windows",
        "Programming Language :: Python :: 3",
        "Programming Language :: Python :: 3.10",
        "Programming Language :: Python :: 3.11",
        "Programming Language :: Python :: 3.12",
    ],
)
