# mirrorswap

mirrorswap works out how to switch the package mirror of an operating system
or a software ecosystem to a chosen mirror site. It covers:

- APT-based systems: Debian, Ubuntu, Armbian, Kali Linux, Linux Mint,
  Linux Lite, ROS, Raspberry Pi OS, Trisquel, deepin, openKylin
  (`mirrorswap.recipes.apt_debian`, `apt_ubuntu`, `apt_others`)
- The YUM/DNF family: AlmaLinux, Anolis OS, Fedora, Rocky Linux, openEuler
  (`mirrorswap.recipes.yum`)
- pacman systems: Arch Linux, Arch Linux CN, MSYS2, Manjaro
  (`mirrorswap.recipes.pacman`)
- Alpine, Gentoo, OpenWrt, Solus, Void Linux, openSUSE
  (`alpine`, `gentoo`, `openwrt`, `linux_misc`)
- Tools: Anaconda, Docker Hub, CocoaPods, Emacs, Flathub, Nix, TeX Live
  (`anaconda`, `dockerhub`, `manual`, `flathub`, `nix`, `tex`)

## How it is organised

- `mirrorswap.recipe` holds the building blocks. A `MirrorSite` describes a
  mirror provider; a `Source` pairs a site with the URL it serves a target
  from. A `Target` bundles a target's sources with its recipe functions
  (`setsrc`, and where available `getsrc` and `resetsrc`) and a `Feature`
  record of what it supports. `Target.find_source(code)` picks a source by
  the mirror's short code, such as `"tuna"` or `"ustc"`, and raises
  `RecipeError` if there is none.
- Each recipe module defines its sources as tuples (for example
  `DEBIAN_SOURCES`) and its targets as constants (for example `DEBIAN`,
  `UBUNTU`, `ARCH`, `DOCKERHUB`).
- A recipe function, such as `debian_setsrc(host, source)`, takes a `Host`
  and a chosen `Source` and returns a `Plan`. The recipe never changes the
  machine: it only asks the `Host` questions (`file_exists`,
  `program_exists`, `command_output`, `cpu_arch`, plus its `platform` and
  `home`) and records what should happen.
- A `Plan` is an ordered list of `Step`s, each with a `StepKind` (run a
  command, back up, append, prepend or overwrite a file, view a file,
  ensure a directory, require root or a program, or show a note, warning,
  log line, error or text to copy). `Plan.commands()` lists only the shell
  commands. `Plan.change_type` records how complete the switch is as a
  `ChangeType` (auto, semi-auto, manual, untested, reset), and
  `Plan.source` the source it switches to.
- A recipe raises `RecipeError` when it cannot go on for the given host
  (for example, TeX Live with neither `tlmgr` nor `mpm` installed), and
  `UnsupportedError` where the system is too old (Debian before 10).

## Example

```python
from mirrorswap.recipe import Host
from mirrorswap.recipes.apt_debian import DEBIAN, debian_setsrc

source = DEBIAN.find_source("tuna")
plan = debian_setsrc(Host(), source)

for step in plan:
    print(step.kind.value, step.text or step.path)

print(plan.commands())
print(plan.change_type)
```

To plan for a machine other than the one you are on, subclass `Host` and
override the methods the recipe consults:

```python
from mirrorswap.recipe import Host
from mirrorswap.recipes.pacman import ARCH, arch_setsrc

class ArmBox(Host):
    def cpu_arch(self):
        return "aarch64"

plan = arch_setsrc(ArmBox(), ARCH.find_source("ustc"))
```

## Helpers

- `mirrorswap.strutil`: `gsub`, `starts_with`, `ends_with`,
  `delete_prefix`, `delete_suffix`, `strip`, `streql`, `quiet_command`.
- `mirrorswap.style`: `Style` and `Level`, `styled` for ANSI styling,
  `format_log`/`log` for `prompt: content` lines, and
  `format_bracket`/`log_bracket`/`log_bracket_to` for
  `[prompt1 prompt2] content` lines; warnings and errors go to stderr.
- `mirrorswap.osutil`: `Platform` and `current_platform`, `home_dir`,
  `powershell_profile`, `powershell_v5_profile`, `file_exists`,
  `dir_exists`, `normalize_path`, `parent_dir`, and `run_lines`/`run`,
  which run a shell command and return one line of its output.

## What it does not do

- It has no command-line program; it is used as a library.
- It does not carry out a `Plan`: nothing in the package performs the
  recorded steps, so applying a plan (running its commands, editing the
  files) is left to the caller.
- It keeps no combined index of targets or aliases; import the target
  constant from its recipe module.
- It does not measure mirror speed or pick a mirror by itself; the caller
  chooses the `Source`.

## Tests

The test suite uses pytest, installed with the `test` extra.