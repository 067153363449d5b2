from setuptools import setup, find_packages

setup(
    name="log2u",
    version="0.2.0",
    description="Leveled, colorized console logging with call-site annotation",
    author="log2u contributors",
    packages=find_packages(where="src"),
    package_dir={"": "src"},
    include_package_data=True,
    package_data={"log2u": ["default_settings.json"]},
    python_requires=">=3.10",

    install_requires=[
        "jsonschema>=4.21.1",
        "python-dotenv>=1.2.1",
    ],

    extras_require={
        "dev": [
            "pytest>=9.0.1",
            "pytest-cov>=7.0.0",
            "flake8>=7.3.0",
            "black>=25.11.0",
        ]
    },

    entry_points={
        "console_scripts": [
            "log2u-demo=log2u.demo:main",
        ]
    },

    classifiers=[
        "Programming Language :: Python :: 3",
        "Operating System :: OS Independent",
        "Environment :: Console",
        "Topic :: System :: Logging",
        "Topic :: Software Development :: Libraries :: Python Modules",
    ],
)
