from setuptools import setup


def main():
    setup(name="intmat",
          version="1.0.0",
          description="Dense integer matrices with a plain-text file format",
          author="rockrid3r",
          author_email="rockrid3r@outlook.com",
          packages=["intmat"],
          python_requires=">=3.8",
          install_requires=[
            "numpy",
          ],
          extras_require={
            "test": [
                "pytest",
            ],
          },
          entry_points={
            "console_scripts": [
                "intmat = intmat.cli:main",
            ],
          },
    )

if __name__ == "__main__":
    main()
