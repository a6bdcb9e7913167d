#!/usr/bin/env python3
"""Setup script for CRMDesk."""

from setuptools import find_packages, setup

setup(
    name="crmdesk",
    version="0.1.0",
    packages=find_packages(include=["crmdesk", "crmdesk.*"]),
    python_requires=">=3.11",
    install_requires=[
        "fastapi>=0.110",
        "uvicorn[standard]>=0.27",
        "python-multipart>=0.0.9",
        "sqlalchemy[asyncio]>=2.0",
        "asyncpg>=0.29",
        "pydantic>=2.5",
        "pydantic-settings>=2.1",
        "loguru>=0.7",
        "python-jose[cryptography]>=3.3",
        "bcrypt>=4.0",
        "minio>=7.2",
        "urllib3>=1.26",
        "prometheus-client>=0.19",
    ],
    extras_require={
        "test": [
            "pytest>=8.0",
            "pytest-asyncio>=0.23",
            "httpx>=0.26",
            "aiosqlite>=0.19",
            "faker>=22.0",
        ],
    },
    entry_points={"console_scripts": ["crmdesk=crmdesk.run:main"]},
)
