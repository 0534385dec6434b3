# vsupdater

A command-line tool that updates a Vintage Story installation to the newest
stable release on the official file server.

## How it works

1. It picks the working directory. If `--working-path` is given, it uses
   that, and the path must be an existing directory. Otherwise it uses the
   `VINTAGE_STORY` environment variable. If neither is set, it uses the
   directory of the running program.
2. If a `.temp` folder was left behind by an interrupted run, it asks
   whether to delete it. Any answer other than `y` stops the tool with exit
   status 0.
3. It moves the files and folders you want to keep into a `.temp` folder
   inside the working directory.
4. It reads the installed version from the name of the
   `assets/version-X.Y.Z.txt` file.
5. It probes the server for releases, starting at the installed version.
   It steps through patch releases first, then the next minor release, then
   the next major release. It stops when none of these exists.
6. If no newer release exists, it moves the kept items back and exits.
   Otherwise it counts down for five seconds and deletes everything in the
   working directory except `.temp` and the running program. It then
   downloads and unpacks the release, lifts the contents of the unpacked
   `vintagestory` folder into the working directory, and moves the kept
   items back.

The command returns exit status 0 on success or when no update is needed.
It returns 1 on any error, or when no release could be found at all.

Probing, downloading and unpacking are done by tools on the host system:

- Linux: `wget` and `tar` (`.tar.gz` archives)
- Windows: PowerShell and `curl` (`.zip` archives)

Only Linux and Windows are supported. On Windows only the server can be
updated, because the client is distributed only as an installer.

Output is coloured with ANSI escape codes. Set `NO_COLOR` to any non-empty
value to turn colour off.

## Installation

```
pip install .
```

## Usage

```
vsupdater [--working-path PATH] [--game-type server|client]
          [--ignore-folders A,B,...] [--ignore-files X,Y,...]
vsupdater --version
```

Example: update a Linux server and keep its data and configuration.

```
vsupdater --working-path /srv/vintagestory --game-type server \
          --ignore-folders data,Mods --ignore-files serverconfig.json
```

`--game-type` defaults to `server`. The lists given to `--ignore-folders`
and `--ignore-files` are comma separated. Each option may be repeated.

Everything in the working directory is deleted except the ignored items,
so list everything you want to keep.

## Library use

The pieces can be imported:

- `vsupdater.version.GameVersion.parse("1.20.7.txt")` parses a version. It
  raises `ValueError` on bad input.
- `vsupdater.fsutils.read_game_version(path)` returns the installed version
  text, or `None`.
- `vsupdater.cli.find_latest_version(current, exists)` runs the release
  probe with any `exists(version)` predicate. It returns `0.0.0` when
  nothing is found.
- `vsupdater.remote.game_type_prefix(game_type, system)` and
  `vsupdater.remote.archive_suffix(system)` build release file names for
  `"linux"` or `"windows"`.

Failures in update steps raise `vsupdater.fsutils.UpdaterError`.

## What it does not do

It has no HTTP client of its own. It does not verify downloaded archives.
It cannot install a game from scratch, because it needs an existing
`assets/version-*` file to know where to start.

## Running the tests

```
pip install .[test]
pytest
```