# aokami

A command-line tool that downloads vanilla game server jars, runs the data
generator bundled in them and turns what the generator writes into compact
JSON files.

## Installation

```
pip install .
```

This installs the `aokami` command. The same entry point can be run as
`python -m aokami.cli`.

## Usage

Global options come before the subcommand:

- `-o, --output-dir` — working directory for generator output (default `output`)
- `-v, --versions-dir` — directory holding downloaded server jars (default `versions`)
- `-V, --version` — print the program version and exit

Both directories are resolved against the current directory and are created
if they do not exist.

On a failure (a file or directory that cannot be read, malformed JSON, a
network error, `JAVA_HOME` not set) the command prints `Error: <message>` to
standard error and exits with status 1.

### Download a server jar

```
aokami download                      # latest release
aokami download --type snapshot      # latest snapshot
aokami download --version 1.21.4     # a specific version id
```

Options: `-v, --version` (default `latest`) and `-t, --type` (`release` or
`snapshot`, default `release`; only used when the version is `latest`).

The version manifest is fetched, the matching entry's metadata is read and
the server jar is saved as `<versions-dir>/<id>.jar`. If that file already
exists it is not downloaded again. If no entry matches, a message is printed
to standard error and nothing is downloaded.

### Run the data generator

```
aokami generate
aokami generate --version 1.21.4 --generator-args=--reports
```

Options: `-v, --version` (default `latest`) and `-g, --generator-args`
(default `--all`). Because the generator argument usually starts with `--`,
give it with `=` as above. It is passed to the generator as a single argument.

With `latest`, the newest version among the files in the versions directory
is chosen; every file there must be named `<major>.<minor>.<patch>...`, and
versions are compared numerically. The generator is started as
`$JAVA_HOME/bin/java -DbundlerMainClass=net.minecraft.data.Main -jar <jar> <args>`
inside the output directory, so `JAVA_HOME` must be set. Its exit status is
printed when it finishes.

### Transform generated data

```
aokami transform registry --registries dimension_type,worldgen/biome
aokami transform blocks
```

`registry` reads every file in `<output-dir>/generated/data/minecraft/<registry>/`
for each listed registry and gathers their JSON into one object keyed by
`minecraft:<registry>` and then `minecraft:<file name without extension>`.
Sub-directories are skipped with a message; to include a nested registry such
as `worldgen/biome`, name it as is. `-r, --registries` takes a comma-separated
list and may be repeated. The result goes to
`<output-dir>/transformed/registries.json`.

`blocks` reads `<output-dir>/generated/reports/blocks.json` and maps each block
id to the id of its default state. Blocks without a `states` list are left
out; a block whose states have no default with an integer id is an error. The
result goes to `<output-dir>/transformed/blocks.json`.

Both take `-o, --output-file` to change the file name inside the
`transformed` directory. Output is written as JSON indented by two spaces.

## Library use

The steps are also available as functions:

```python
from pathlib import Path

from aokami.transform import get_output_path, transform_blocks, transform_registries
from aokami.versions import find_latest_version, parse_version

blocks = transform_blocks(Path("output/generated/reports/blocks.json"))
registries = transform_registries(Path("output/generated/data"), ["dimension_type"])
print(len(blocks), get_output_path(Path("output")))  # output/transformed

print(parse_version("1.21.4"))          # Version(major=1, minor=21, patch=4)
print(find_latest_version("versions"))  # e.g. "1.21.4"
```

- `aokami.download` — `make_session()`, `get_versions(session)` and
  `download_server(session, versions_dir, url)`.
- `aokami.types` — frozen dataclasses for the manifest and version metadata,
  `parse_versions_response(data)`, `parse_version_metadata(data)` (both raise
  `ValueError` on missing or mistyped fields), `ReleaseType`, and
  `GameVersionsResponse.find(version, release_type)`.
- `aokami.cli` — `main(argv=None)`, `build_parser()`, `get_work_dir(name, create)`
  and `build_java_command(jar, initial_args)`.

## Running the tests

```
pip install .[test]
pytest
```