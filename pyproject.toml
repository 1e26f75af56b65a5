[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "collectionlab"
version = "0.1.0"
description = "Small runnable exercises on collections, ciphers, hashing and graphs"
requires-python = ">=3.10"
dependencies = []
keywords = [
    "collections",
    "caesar-cipher",
    "homophonic-cipher",
    "sha3",
    "pagerank",
    "graphs",
    "dijkstra",
    "dining-philosophers",
    "teaching",
]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: Console",
    "Intended Audience :: Education",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Education",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
collectionlab-caesar = "collectionlab.caesar:main"
collectionlab-decoder = "collectionlab.decoder:main"
collectionlab-homophonic = "collectionlab.homophonic:main"
collectionlab-dupes = "collectionlab.dupes:main"
collectionlab-pagerank = "collectionlab.pagerank:main"
collectionlab-community = "collectionlab.community:main"
collectionlab-shortest-path = "collectionlab.shortest_path:main"
collectionlab-centrality = "collectionlab.centrality:main"
collectionlab-languages = "collectionlab.languages:main"
collectionlab-salads = "collectionlab.salads:main"
collectionlab-tally = "collectionlab.tally:main"
collectionlab-fruit-salad = "collectionlab.fruit_cli:salad_main"
collectionlab-portugal-fruits = "collectionlab.fruit_cli:portugal_main"
collectionlab-lowmem-salad = "collectionlab.fruit_cli:lowmem_main"
collectionlab-philosophers = "collectionlab.philosophers:main"

[tool.hatch.build.targets.wheel]
packages = ["collectionlab"]

[tool.pytest.ini_options]
addopts = "-ra"
testpaths = ["tests"]

[tool.ruff]
line-length = 88
target-version = "py310"

[tool.ruff.lint]
select = ["E", "F", "W", "I", "B", "UP"]

[tool.mypy]
python_version = "3.10"
warn_unused_ignores = true
warn_redundant_casts = true
