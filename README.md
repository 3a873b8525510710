# autogensummary

Generate the `SUMMARY.md` of an mdBook from the layout of its source
directory. It can be run by hand or used as an mdBook preprocessor, in
which case the summary is refreshed on every build.

## Installation

```
pip install autogensummary
```

## Generating a summary by hand

```
autogensummary gen path/to/book/src
```

This walks the directory and writes `SUMMARY.md` into it. The file is
created if it is missing and only rewritten when its content would
change.

Options of `gen`:

- `-t`, `--title`: use the first `# ` heading of each markdown file as
  its link text instead of the file name.
- `-T`, `--dir-title`: use the first `# ` heading of a directory's index
  file as the directory's link text instead of the directory name. It
  also keeps the root index's heading as its title; otherwise the root
  entry is called `Welcome`.
- `-i`, `--dir-index-names NAMES`: comma-separated names of files that
  serve as a directory index (default `README.md`). The first name is
  used when a stub index is generated. An empty list is an error.
- `-w`, `--dir-without-index-behavior {ignore,draft,generate-stub-index}`
  (case-insensitive): what to do with a directory that has no index
  file. `ignore` (the default) leaves it out, `draft` lists it as an
  entry with an empty link, and `generate-stub-index` creates an empty
  index file for it.

How the summary is laid out:

- Only files ending in `.md` are listed; index files are recognised by
  name and become the link of their directory's entry.
- Entries are sorted by path at every level, and subdirectories are
  nested under their directory's entry, indented by four spaces.
- Top-level directories are separated from the surrounding entries by
  `----` lines, and `SUMMARY.md` itself is left out.
- If the root directory itself has no index and is ignored, a warning
  with suggested fixes is printed and `SUMMARY.md` holds only the
  `# Summary` heading.

## Using it as an mdBook preprocessor

Add to `book.toml`:

```toml
[preprocessor.auto-gen-summary]
command = "autogensummary"
first-line-as-link-text = true
index-first-line-as-directory-link-text = true
directory-without-index-behavior = "draft"
directory-index-names = ["README.md", "index.md"]
```

All keys besides `command` are optional. A value of the wrong type for
`directory-without-index-behavior` or `directory-index-names`, an
unknown behavior name, or an empty list of index names makes the
preprocessor fail with an error message and exit status 1.

mdBook runs `autogensummary supports <renderer>`, which exits with 0 for
every renderer except one named `not-supported`. It then runs
`autogensummary` with the context and book as JSON on standard input.
The preprocessor regenerates `SUMMARY.md` in the book's `src` directory
(or the one set under `[book] src`) and writes back a book whose
chapters follow the generated summary, with each chapter's content read
from its file. A warning is printed when the calling mdBook version
differs from 0.4.52.

## Library use

```python
from pathlib import Path

from autogensummary.config import AutoGenConfig, DirectoryWithoutIndexBehavior
from autogensummary.summary import gen_summary, render_summary

config = AutoGenConfig(
    first_line_as_link_text=True,
    directory_without_index_behavior=DirectoryWithoutIndexBehavior.DRAFT,
)

print(render_summary(Path("book/src"), config))  # text only, nothing written
gen_summary(Path("book/src"), config)            # writes SUMMARY.md
```

`AutoGenConfig.apply_config` reads the options above from a parsed
`book.toml` mapping and raises `ConfigError` on invalid values.
`walk_dir`, `sort_entry_recursive`, `get_title` and
`generate_summary_line` in `autogensummary.summary` expose the steps of
the generation.

## What it does not do

The book handed back to mdBook is assembled directly from the directory
tree, not by parsing `SUMMARY.md`: it has no prefix or suffix chapters
and no part titles, and hand edits to `SUMMARY.md` are overwritten on
the next run.