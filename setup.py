from setuptools import setup, find_packages

setup(
    name="pandidorty-bakery",
    version="0.1.0",
    packages=find_packages(include=["bakery", "bakery.*", "orders", "orders.*", "staff", "staff.*"]),
    py_modules=["manage"],
    include_package_data=True,
    install_requires=[
        "Django>=4.2",
        "djangorestframework>=3.14",
        "django-anymail>=10.0",
        "python-dotenv>=1.0",
        "whitenoise>=6.5",
    ],
    extras_require={
        "postgres": ["psycopg[binary]>=3.1"],
        "test": ["pytest>=7.4", "pytest-django>=4.5"],
    },
    author="Pandí Dorty",
    author_email="pandidorty@gmail.com",
    description="Order intake and admin API for the Pandí Dorty bakery (cakes, tastings, Christmas sweets).",
    long_description=open("README.md", encoding="utf-8").read(),
    long_description_content_type="text/markdown",
    license="MIT",
    classifiers=[
        "Framework :: Django",
        "Programming Language :: Python :: 3",
        "Operating System :: OS Independent",
        "License :: OSI Approved :: MIT License"
    ],
    python_requires='>=3.9',
)
