[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "aprilkit"
version = "0.1.0"
description = "Grayscale image utilities, 2D geometry, small linear algebra and homography estimation for fiducial tag work"
requires-python = ">=3.10"
dependencies = [
    "numpy",
]
keywords = ["homography", "image processing", "geometry", "convex hull", "polygon", "fiducial"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Developers",
    "Intended Audience :: Science/Research",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Operating System :: OS Independent",
    "Topic :: Scientific/Engineering :: Image Processing",
    "Topic :: Scientific/Engineering :: Mathematics",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[tool.hatch.build.targets.wheel]
packages = ["aprilkit"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
