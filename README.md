# variantmod

Building blocks for keeping generated files in step with the versions of
the things they depend on: applying JSON Patch documents to data,
rewriting text with regular expressions, merging template values,
fetching content over HTTP, and assembling the settings of a module
manager. It uses only the standard library.

## Installation

```
pip install variantmod
```

To run the test suite as well:

```
pip install "variantmod[test]"
pytest
```

## JSON Patch

`variantmod.jsonpatch` works on plain Python data (dicts, lists and
scalars as produced by `json.loads`):

- `decode_patch(text)` parses a JSON Patch document (a JSON array of
  operations) and checks that each operation is well formed;
- `apply_patch(document, operations)` returns a copy of `document` with
  the operations applied in order. The input is not modified.

Supported operations are `add`, `remove`, `replace`, `move`, `copy` and
`test`. Array paths accept `-` for appending in `add`. Malformed patches,
missing paths, out-of-range indexes and failed `test` operations raise
`JSONPatchError`, a subclass of `ValueError`.

```python
from variantmod.jsonpatch import apply_patch, decode_patch

ops = decode_patch('[{"op": "add", "path": "/foo/1", "value": 4}]')
apply_patch({"foo": [1, 2, 3]}, ops)   # {"foo": [1, 4, 2, 3]}
```

## Regular expression replacement

`variantmod.regexp_replace.regexp_replace(source, pattern, template)`
replaces every match of `pattern` in `source` with `template`. The
template may refer to groups as `$1`, `${1}`, `$name` or `${name}`; `$$`
gives a literal `$`. References to groups that do not exist or did not
take part in the match expand to nothing, and a `$` that starts no valid
reference is kept as it is. An empty match directly after a previous
match is skipped. `source` may be `str` or `bytes`; bytes in give bytes
out.

`expand_template(template, match)` expands such a template against a
single `re.Match`.

For example, the pattern `(FROM helmfile:)(\S+)(\s+)` with the template
`${1}0.95.0${3}` turns `FROM helmfile:0.94.0` into `FROM helmfile:0.95.0`.

## Merging values

`variantmod.values.merge_by_overwrite(*args)` merges any number of
mappings, left to right, into a new dict. Later plain values overwrite
earlier ones; where both sides hold a mapping under the same key the two
are merged recursively; where the new value is a mapping but the existing
one is not, the existing value is kept. `None` or empty arguments are
skipped.

## Fetching over HTTP

`variantmod.httpget.HttpGetter().do_request(url)` performs a GET request
and returns the response body as text, including the body of error
responses. `FakeGetter(expectations)` answers from a dictionary of URL to
body and raises `LookupError` for any URL it was not given, which makes it
useful in tests.

## Manager settings

`variantmod.options.build_settings(*args)` applies options in order and
returns a `ManagerSettings` dataclass with defaults filled in:

- module file `variant.mod` and lock file `variant.lock`;
- a `logging.Logger` named `variantmod`;
- the current directory as working directory, and the same directory for
  fetching remote sources unless set separately;
- cache directory `.variant/mod/cache`, made absolute against the working
  directory.

Options:

- `module_file(path)`, `lock_file(path)`
- `with_file(path)` sets the module file and derives the lock file:
  `variant.mod` gives `variant.lock`, `name.variantmod` gives
  `name.variantmod.lock`, `name.mod` gives `name.lock`; any other
  extension raises `OptionError`
- `work_dir(wd)`, `go_getter_work_dir(wd)`
- `logger(log)`, `commander(run_command)`
- `in_memory_module(module)` supplies a module definition directly

## What this package does not do

It has no command-line tool and no module manager that reads module or
lock files, resolves dependency versions or writes provisioned files; the
settings above only describe how such a manager would be configured. It
does not patch YAML files in place: JSON Patch is applied to plain Python
data, so keeping comments and layout of a YAML document is up to the
caller.