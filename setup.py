from setuptools import setup, find_packages

setup(
    name="xmlprompt",
    version="0.1.0",
    description="Immutable builder for XML-structured LLM prompts with few-shot examples",
    author="phisanti",
    author_email="tisalon@outlook.com",
    license="MIT",
    packages=find_packages(exclude=["tests", "tests.*", "scripts"]),
    install_requires=[
        "langchain-core>=0.3.0",
        "python-dotenv>=1.0.0",
    ],
    extras_require={
        "test": ["pytest>=7.0"],
    },
    python_requires=">=3.10",
    long_description=open("README.md").read(),
    long_description_content_type="text/markdown",
)
