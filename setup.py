from setuptools import setup, find_packages

setup(
    name="resume_text_extractor",
    version="0.1.0",
    packages=find_packages(exclude=["tests", "tests.*"]),
    install_requires=[
        "pydantic>=2.0.0",
        "pydantic-settings>=2.0.0",
        "python-dotenv>=0.19.0",
        "python-docx>=0.8.11",
        "mammoth>=1.6.0",
        "pdfplumber>=0.10.0",
        "pdfminer.six>=20221105",
        "PyPDF2>=2.0.0",
        "fastapi>=0.100.0",
        "uvicorn>=0.20.0",
        "python-multipart>=0.0.6",
        "click>=8.0.0",
        "tqdm>=4.60.0",
        "psutil>=5.8.0",
    ],
    extras_require={
        "test": [
            "pytest>=7.0.0",
            "httpx>=0.24.0",
        ],
    },
    python_requires=">=3.8",
)
