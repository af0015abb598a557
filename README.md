# pypipex

`pypipex` runs the same pipeline as this shell command:

```sh
< infile cmd1 | cmd2 > outfile
```

The command takes exactly four arguments: an input file, two commands and an output file.

```sh
pypipex infile "grep foo" "wc -l" outfile
```

## How it behaves

- Each command string is split on spaces, and empty fields are dropped. No shell quoting or expansion is applied.
- A command word that contains `/` is used as a path exactly as given.
- Any other command word is searched for in the directories listed in `PATH`, in order. The first existing file wins.
- Errors go to standard error as a line that starts with `pipex:`:
  - a missing command gives `pipex: <cmd>: command not found`;
  - an unset `PATH` gives `pipex: No such file or directory`;
  - a file that cannot be opened gives `pipex: ` followed by the system's error message.
- A command that is found but cannot be executed fails without a message.
- The output file is created or truncated with mode `0644`, even when the first command fails.
- The exit status is the exit status of the second command. It is 1 if the second command could not be started. It is 0 if the second command was killed by a signal.
- Any number of arguments other than four prints `pipex: too few/many arguments` and exits with status 1.

## Using it from Python

```python
from pypipex.runner import pipex

status = pipex("input.txt", "grep foo", "wc -l", "output.txt")
```

`env` is an optional fifth argument. It is a mapping that is used both for the `PATH` lookup and as the environment of the two commands. When it is omitted, the current process environment is used.

Other functions in `pypipex.runner`:

- `parse_command(command)` splits a command line into arguments on spaces.
- `start_command(command, env, stdin, stdout)` resolves the command and starts it with `subprocess.Popen`. It raises `PipexError` when the command cannot be resolved, and `OSError` when it cannot be executed.
- `main(argv=None)` is the entry point behind the `pypipex` command. It returns the exit status.

Command lookup lives in `pypipex.path`:

- `find_cmd(command, env)` resolves a command name the way the runner does.
- `get_path(env)` returns the `PATH` value from `env`.
- `join_path(directory, command)` joins a directory and a command name with `/`.
- `split_fields(text, sep)` splits `text` on `sep` and drops empty fields.

Errors live in `pypipex.errors`:

- `PipexError` is the base class.
- `UsageError`, `PathNotSetError` and `CommandNotFoundError` derive from it.
- `report(error, stream=None)` writes the `pipex:` line and returns it. It writes to standard error unless a stream is given.

The package also ships small helpers:

- `pypipex.chars`: ASCII classification and case conversion.
- `pypipex.memory`: byte-buffer search, compare, copy, move, fill and allocation.
- `pypipex.text`: string search, compare, slicing, joining, trimming and bounded copies.
- `pypipex.numbers`: `atoi`, `itoa` and `isqrt` over 32-bit integers.
- `pypipex.output`: writing characters, strings, lines and numbers to a stream.

## What it does not do

- It runs exactly two commands. Longer pipelines are not supported.
- It has no here-document mode and no append mode for the output file.
- Command strings are not parsed like a shell would parse them, so quotes are passed through literally.