# setup.py
from setuptools import setup, find_packages

setup(
    name="hellosign-client",
    version="0.1.0",
    description="HelloSign e-signature API client",
    packages=find_packages(where=".", exclude=["tests", "tests.*"]),
    python_requires=">=3.8",
    install_requires=[
        "requests",
        "pydantic>=2",
        "email-validator",
        "python-dotenv",
        "fastapi",
        "python-multipart",
        "uvicorn",
    ],
    extras_require={
        "test": [
            "pytest",
            "httpx",
        ],
    },
)
