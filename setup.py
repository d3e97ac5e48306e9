from setuptools import setup

setup(
    name="pytpcontrol",
    packages=["pytpcontrol"],
    version="0.1",
    license="MIT",
    description="Python library for the TelePresence codec HTTP/XML API",
    long_description="Python library for the TelePresence codec HTTP/XML API. It reads configuration, status and valuespace documents, sends XML commands and registers HTTP feedback subscriptions",
    keywords=["TelePresence", "Codec", "xAPI", "putxml", "HttpFeedback"],
    install_requires=["requests>=2.26.0", "aiohttp>=3.7.4"],
    extras_require={
        "test": ["pytest>=7", "pytest-asyncio"],
        "testing": ["rich"],
    },
    classifiers=[
        "Development Status :: 4 - Beta",
        "Topic :: Home Automation",
        "Programming Language :: Python :: 3",
        "Programming Language :: Python :: 3.8",
        "Programming Language :: Python :: 3.9",
        "Programming Language :: Python :: 3.10",
        "Programming Language :: Python :: 3.11",
        "Programming Language :: Python :: 3.12",
    ],
)
