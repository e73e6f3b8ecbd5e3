from setuptools import setup, find_packages

with open("README.md") as f:
    long_description = f.read()

setup(
    name="dlna_renderer",
    version="0.1.0",
    description="Playback control for DLNA/UPnP media renderers",
    long_description=long_description,
    long_description_content_type="text/markdown",
    author="DMR Controller Team",
    packages=find_packages(exclude=["tests", "tests.*"]),
    install_requires=[
        "upnpclient>=1.0.3",
        "requests>=2.31.0",
        "python-didl-lite>=1.3.1",
    ],
    python_requires=">=3.9",
    classifiers=[
        "Development Status :: 4 - Beta",
        "Intended Audience :: Developers",
        "License :: OSI Approved :: MIT License",
        "Operating System :: OS Independent",
        "Programming Language :: Python :: 3",
        "Programming Language :: Python :: 3.9",
        "Programming Language :: Python :: 3.10",
        "Programming Language :: Python :: 3.11",
        "Programming Language :: Python :: 3.12",
        "Topic :: Multimedia :: Sound/Audio",
        "Topic :: Multimedia :: Video",
    ],
)
