# plugindocs

Checks for Terraform provider documentation, and a small Markdown-to-plain-text
renderer. It is a library: you call it from your own code.

## Install

```
pip install .
```

For tests:

```
pip install .[test]
pytest
```

## What it checks

Every failed check raises `plugindocs.directory.CheckError`.

- **Directory layout** (`plugindocs.directory`): `is_valid_registry_directory`,
  `is_valid_legacy_directory` and `is_valid_cdktf_directory` say whether a
  slash-separated directory is a known documentation directory.
  `invalid_directories_check` raises unless it is one of them, and
  `mixed_directories_check` raises when registry (`docs/...`) and legacy
  (`website/docs/...`) layouts are used together. Files directly in `docs/` do not
  count as the registry layout.
- **File extensions** (`plugindocs.file_extension`): `file_extension_check`,
  `file_path_ends_with_extension_from` and `trim_file_extension`, which removes
  every extension (`thing.html.markdown` becomes `thing`). The accepted sets are
  `VALID_LEGACY_FILE_EXTENSIONS` and `VALID_REGISTRY_FILE_EXTENSIONS`.
- **File size** (`plugindocs.files`): `file_size_check(provider_dir, path)` rejects
  files at or above the registry limit of 500,000 bytes; an `OSError` propagates if
  the file cannot be examined. `FileOptions.full_path` joins a path to an optional
  `base_path`.
- **Missing or extra files** (`plugindocs.file_mismatch`): `FileMismatchCheck`
  compares documentation file names against a `ProviderSchema` of resources, data
  sources, ephemeral resources and functions. Entries in `FileMismatchOptions` may
  be plain names or objects with a `name` attribute such as `os.DirEntry`; ignore
  lists are `ignore_file_mismatch` and `ignore_file_missing`. `run()` raises one
  `CheckError` listing every mismatch, and does nothing when no schema is given.
- **Front matter** (`plugindocs.frontmatter`): `extract_front_matter` returns the
  YAML between the leading `---` lines. `FrontMatterCheck.run` parses it and
  enforces the rules in `FrontMatterOptions` (forbidden or required keys, allowed
  subcategories), returning a `FrontMatterData`.
- **Whole files** (`plugindocs.provider_file`): `ProviderFileCheck(provider_dir,
  options).run(path)` runs the extension, size and front matter checks on one file
  below a provider directory, with the file name prefixed to any error.

## Example

```python
from plugindocs.directory import CheckError, mixed_directories_check
from plugindocs.frontmatter import FrontMatterCheck, FrontMatterOptions

try:
    mixed_directories_check(["docs/resources/thing.md", "website/docs/index.md"])
except CheckError as err:
    print(err)

page = b"---\nsubcategory: Networking\n---\n\n# Title\n"
data = FrontMatterCheck(FrontMatterOptions(allowed_subcategories=["Networking"])).run(page)
print(data.subcategory)
```

## Plain text from Markdown

```python
from plugindocs.mdplain import plain_markdown

print(plain_markdown("See [the guide](https://example.com/guide) for **details**."))
```

Links keep their destination unless `is_relative_link` says it is relative
(`#anchor` or `/path`), images are dropped, bare `www.` links get an `http://`
prefix, and code blocks and paragraphs that start with `|` are kept as they are.
`TextRenderer.render` works on a markdown-it token stream if you parse the text
yourself.

## What it does not do

There is no command-line program. The package does not generate documentation
pages, migrate old website layouts or obtain provider schemas from Terraform:
build a `ProviderSchema` yourself from whatever schema data you have.