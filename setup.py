"""Install the simple-comment request trust boundary package."""

from setuptools import setup, find_packages

setup(
    name='simple-comment-auth',
    version='0.1.0',
    packages=find_packages(include=['simple_comment', 'simple_comment.*'],
                           exclude=['*tests*']),
    python_requires='>=3.8',
    install_requires=[
        "pyjwt",
        "pydantic>=2",
        "pytz",
        "typing_extensions",
        "python-dotenv",
        "python-json-logger>=3.1",
        "wcmatch",
    ],
    extras_require={
        'test': [
            "pytest",
            "hypothesis>=6.100",
        ]
    },
    zip_safe=False
)
