# wut/corrector/data.py
"""
Static vocabularies used by the corrector.

Every table here is read-only data. Supporting a new tool means adding
entries, never code. Order matters for the ordered tables: when two
candidates are equally close to a typo, the one listed first wins.
"""

# Root commands, most frequently typed first
ROOT_COMMANDS = (
    "git", "docker", "kubectl", "npm", "yarn", "pnpm", "npx", "pip", "pip3",
    "python", "python3", "node", "go", "cargo", "rustc", "make", "cmake",
    "ls", "cd", "cat", "grep", "find", "tar", "curl", "wget", "ssh", "scp",
    "rsync", "chmod", "chown", "mkdir", "rmdir", "rm", "cp", "mv", "touch",
    "echo", "ps", "kill", "pkill", "killall", "top", "htop", "df", "du",
    "sed", "awk", "head", "tail", "less", "more", "vim", "nano", "emacs",
    "systemctl", "journalctl", "service", "apt", "apt-get", "apt-cache",
    "brew", "dnf", "yum", "pacman", "snap", "helm", "terraform", "ansible",
    "docker-compose", "podman", "minikube", "kind", "aws", "gcloud", "az",
    "ln", "diff", "which", "whereis", "man", "sudo", "export", "source",
    "history", "clear", "pwd", "whoami", "ping", "traceroute", "tree",
    "sort", "uniq", "wc", "xargs", "zip", "unzip", "gzip", "gunzip",
    "java", "javac", "mvn", "gradle", "ruby", "gem", "bundle", "rails",
    "php", "composer", "code", "stat", "file", "env", "date", "free",
    "uptime", "lsof", "netstat", "ss", "ip", "ifconfig", "dig", "nslookup",
    "crontab", "tmux", "screen", "watch", "nohup", "jobs", "fg", "bg",
    "alias", "unalias", "type", "exit", "test", "true", "false", "printf",
    "openssl", "gpg", "jq", "yq", "fd", "rg", "bat", "exa", "eza", "lsd",
    "fzf", "dust", "duf", "procs", "btop", "mount", "umount", "lsblk",
    "fdisk", "mkfs", "dd", "useradd", "usermod", "passwd", "groups", "id",
    "uname", "hostname", "shutdown", "reboot", "deno", "bun", "poetry",
    "pipenv", "virtualenv", "conda", "pytest", "tox", "black", "ruff",
)

SUBCOMMANDS = {
    "git": (
        "status", "add", "commit", "push", "pull", "fetch", "branch",
        "checkout", "switch", "restore", "merge", "rebase", "log", "diff",
        "clone", "init", "stash", "tag", "remote", "reset", "revert",
        "show", "cherry-pick", "blame", "bisect", "config", "describe",
        "grep", "mv", "rm", "clean", "submodule", "worktree", "reflog",
        "archive", "gc", "help", "am", "apply", "format-patch", "shortlog",
    ),
    "docker": (
        "ps", "run", "exec", "build", "pull", "push", "images", "image",
        "container", "volume", "network", "logs", "stop", "start",
        "restart", "rm", "rmi", "inspect", "compose", "login", "logout",
        "tag", "kill", "top", "stats", "system", "prune", "cp", "create",
        "attach", "commit", "diff", "events", "export", "history", "import",
        "info", "load", "pause", "port", "rename", "save", "search",
        "unpause", "update", "version", "wait", "buildx", "context",
    ),
    "kubectl": (
        "get", "describe", "apply", "delete", "create", "logs", "exec",
        "port-forward", "config", "rollout", "scale", "edit", "patch",
        "label", "annotate", "expose", "run", "set", "top", "cordon",
        "uncordon", "drain", "taint", "explain", "version", "cluster-info",
        "api-resources", "auth", "cp", "attach", "diff", "wait", "replace",
    ),
    "npm": (
        "install", "uninstall", "update", "run", "test", "start", "init",
        "publish", "audit", "ci", "list", "outdated", "link", "pack",
        "login", "logout", "version", "view", "search", "cache", "config",
        "exec", "doctor", "prune", "dedupe", "fund",
    ),
    "yarn": (
        "add", "remove", "install", "upgrade", "run", "test", "start",
        "build", "init", "publish", "info", "list", "outdated", "why",
        "workspace", "workspaces", "cache", "config", "dlx",
    ),
    "pip": (
        "install", "uninstall", "freeze", "list", "show", "download",
        "wheel", "check", "config", "search", "cache", "index", "inspect",
        "hash", "debug", "help",
    ),
    "go": (
        "build", "run", "test", "get", "install", "mod", "fmt", "vet",
        "clean", "env", "generate", "list", "version", "doc", "tool",
        "work", "fix", "bug",
    ),
    "cargo": (
        "build", "run", "test", "check", "new", "init", "add", "remove",
        "update", "install", "uninstall", "publish", "bench", "doc",
        "clean", "fmt", "clippy", "search", "tree", "fix", "vendor",
    ),
    "systemctl": (
        "start", "stop", "restart", "reload", "status", "enable",
        "disable", "is-active", "is-enabled", "list-units",
        "list-unit-files", "daemon-reload", "mask", "unmask", "cat",
        "show", "edit", "kill", "reboot", "poweroff",
    ),
    "apt": (
        "install", "remove", "purge", "update", "upgrade", "full-upgrade",
        "autoremove", "search", "show", "list", "edit-sources",
    ),
    "apt-get": (
        "install", "remove", "purge", "update", "upgrade", "dist-upgrade",
        "autoremove", "autoclean", "clean", "source", "build-dep",
        "download", "check",
    ),
    "brew": (
        "install", "uninstall", "reinstall", "update", "upgrade", "search",
        "info", "list", "outdated", "cleanup", "doctor", "services", "tap",
        "untap", "link", "unlink", "pin", "unpin", "deps", "uses",
    ),
    "helm": (
        "install", "upgrade", "uninstall", "list", "repo", "search",
        "template", "lint", "package", "pull", "push", "rollback",
        "status", "history", "show", "dependency", "create", "get",
    ),
    "terraform": (
        "init", "plan", "apply", "destroy", "validate", "fmt", "output",
        "show", "state", "import", "refresh", "workspace", "providers",
        "graph", "console", "taint", "untaint", "login", "logout",
    ),
    "docker-compose": (
        "up", "down", "build", "ps", "logs", "exec", "run", "start",
        "stop", "restart", "pull", "push", "config", "rm", "kill",
        "pause", "unpause", "top", "images", "create", "events",
    ),
}

# Parent tools whose subcommands are often typed without the tool name
PREFIXABLE_TOOLS = ("git", "docker", "kubectl")

LONG_FLAGS = {
    "git": (
        "all", "amend", "message", "force", "force-with-lease", "verbose",
        "quiet", "dry-run", "set-upstream", "set-upstream-to", "tags",
        "rebase", "no-ff", "ff-only", "squash", "oneline", "graph",
        "decorate", "stat", "cached", "staged", "hard", "soft", "mixed",
        "patch", "interactive", "continue", "abort", "skip", "global",
        "local", "list", "branch", "depth", "recursive", "prune", "delete",
        "no-verify", "signoff", "author", "since", "until", "name-only",
        "name-status", "no-edit", "edit", "track", "orphan", "detach",
        "porcelain", "short", "untracked-files", "ignored", "include-untracked",
    ),
    "docker": (
        "interactive", "tty", "detach", "publish", "volume", "env",
        "env-file", "name", "rm", "network", "user", "workdir", "hostname",
        "memory", "cpus", "restart", "entrypoint", "label", "all", "quiet",
        "force", "tag", "file", "build-arg", "no-cache", "platform",
        "follow", "tail", "since", "timestamps", "format", "filter",
        "privileged", "mount", "expose", "link", "pull", "target", "volumes",
    ),
    "kubectl": (
        "namespace", "all-namespaces", "output", "filename", "selector",
        "watch", "context", "container", "follow", "tail", "previous",
        "replicas", "image", "dry-run", "force", "grace-period", "recursive",
        "show-labels", "sort-by", "field-selector", "kubeconfig", "cluster",
        "user", "timeout", "wait", "overwrite", "record", "template",
    ),
    "npm": (
        "save", "save-dev", "save-exact", "save-optional", "global",
        "production", "force", "legacy-peer-deps", "dry-run", "yes",
        "registry", "prefix", "workspace", "workspaces", "verbose",
        "silent", "json", "depth", "omit", "include", "audit", "fund",
    ),
    "pip": (
        "upgrade", "user", "requirement", "editable", "no-cache-dir",
        "index-url", "extra-index-url", "target", "prefix", "quiet",
        "verbose", "force-reinstall", "no-deps", "pre", "constraint",
        "break-system-packages", "yes", "outdated", "format",
    ),
    "curl": (
        "request", "header", "data", "data-raw", "data-binary", "output",
        "remote-name", "location", "head", "include", "verbose", "silent",
        "show-error", "insecure", "user", "cookie", "cookie-jar", "fail",
        "form", "compressed", "max-time", "connect-timeout", "retry",
        "user-agent", "referer", "proxy", "upload-file", "json",
    ),
    "ls": (
        "all", "almost-all", "human-readable", "reverse", "recursive",
        "sort", "format", "color", "size", "directory", "classify",
        "group-directories-first", "inode", "time-style", "full-time",
    ),
    "grep": (
        "ignore-case", "recursive", "line-number", "invert-match",
        "files-with-matches", "files-without-match", "count",
        "only-matching", "word-regexp", "extended-regexp", "fixed-strings",
        "perl-regexp", "after-context", "before-context", "context",
        "include", "exclude", "exclude-dir", "color", "quiet", "max-count",
    ),
    "tar": (
        "extract", "create", "gzip", "bzip2", "xz", "verbose", "file",
        "list", "append", "update", "directory", "exclude",
        "strip-components", "to-stdout", "keep-old-files", "overwrite",
    ),
    "rsync": (
        "archive", "verbose", "compress", "recursive", "dry-run", "rsh",
        "progress", "partial", "human-readable", "update", "delete",
        "exclude", "include", "checksum", "one-file-system", "links",
    ),
    "systemctl": (
        "now", "user", "system", "force", "quiet", "no-pager", "all",
        "type", "state", "failed", "full", "lines", "output",
    ),
}

SHORT_FLAGS = {
    "docker": {
        "i": ("--interactive", "Keep STDIN open"),
        "t": ("--tty", "Allocate a pseudo-TTY"),
        "d": ("--detach", "Run container in background"),
        "p": ("--publish", "Publish a container's port"),
        "v": ("--volume", "Bind mount a volume"),
        "e": ("--env", "Set environment variable"),
        "u": ("--user", "Username or UID"),
        "w": ("--workdir", "Working directory inside container"),
        "h": ("--hostname", "Container host name"),
        "m": ("--memory", "Memory limit"),
        "n": ("--name", "Assign a name to the container"),
        "q": ("--quiet", "Suppress output"),
        "f": ("--force", "Force the operation"),
        "a": ("--all", "Show/act on all items"),
    },
    "git": {
        "a": ("--all", "Stage all changes"),
        "m": ("--message", "Commit message"),
        "u": ("--set-upstream", "Set upstream tracking branch"),
        "v": ("--verbose", "Verbose output"),
        "q": ("--quiet", "Suppress output"),
        "f": ("--force", "Force the operation"),
        "b": ("--branch", "Checkout new branch"),
        "p": ("--patch", "Interactive patch mode"),
        "n": ("--no-ff", "No fast-forward merge"),
        "r": ("--rebase", "Rebase instead of merge"),
        "s": ("--squash", "Squash commits"),
        "t": ("--tags", "Include tags"),
        "d": ("--delete", "Delete branch"),
        "D": ("--delete --force", "Force delete branch"),
    },
    "kubectl": {
        "n": ("--namespace", "Namespace"),
        "o": ("--output", "Output format (json/yaml/wide)"),
        "f": ("--filename", "Filename/directory to apply"),
        "A": ("--all-namespaces", "All namespaces"),
        "w": ("--watch", "Watch for changes"),
        "l": ("--selector", "Label selector"),
        "v": ("--verbose", "Verbosity level"),
    },
    "tar": {
        "x": ("--extract", "Extract files"),
        "c": ("--create", "Create archive"),
        "z": ("--gzip", "Filter through gzip"),
        "j": ("--bzip2", "Filter through bzip2"),
        "v": ("--verbose", "List processed files"),
        "f": ("--file", "Archive file"),
        "t": ("--list", "List contents"),
        "r": ("--append", "Append files"),
        "u": ("--update", "Update archive"),
        "C": ("--directory", "Change to directory"),
    },
    "ls": {
        "a": ("--all", "Show hidden files"),
        "l": ("--format=long", "Long listing format"),
        "h": ("--human-readable", "Human-readable sizes"),
        "r": ("--reverse", "Reverse sort order"),
        "t": ("--sort=time", "Sort by modification time"),
        "s": ("--size", "Print size of each file"),
        "R": ("--recursive", "List subdirectories recursively"),
        "S": ("--sort=size", "Sort by file size"),
        "1": ("--format=single-column", "One file per line"),
    },
    "grep": {
        "i": ("--ignore-case", "Case-insensitive search"),
        "r": ("--recursive", "Search recursively"),
        "n": ("--line-number", "Show line numbers"),
        "v": ("--invert-match", "Invert match"),
        "l": ("--files-with-matches", "Print matching filenames"),
        "c": ("--count", "Count matching lines"),
        "o": ("--only-matching", "Print only matching part"),
        "w": ("--word-regexp", "Match whole words"),
        "E": ("--extended-regexp", "Extended regex"),
        "A": ("--after-context", "Lines after match"),
        "B": ("--before-context", "Lines before match"),
        "q": ("--quiet", "Suppress output"),
    },
    "curl": {
        "X": ("--request", "HTTP method"),
        "H": ("--header", "Custom header"),
        "d": ("--data", "POST data"),
        "o": ("--output", "Write output to file"),
        "O": ("--remote-name", "Write to filename from URL"),
        "L": ("--location", "Follow redirects"),
        "I": ("--head", "Fetch headers only"),
        "v": ("--verbose", "Verbose mode"),
        "s": ("--silent", "Silent mode"),
        "k": ("--insecure", "Skip TLS verification"),
        "u": ("--user", "User:password"),
        "c": ("--cookie", "Send cookie"),
        "f": ("--fail", "Fail on HTTP errors"),
    },
    "ssh": {
        "i": ("--identity", "Identity file (private key)"),
        "p": ("--port", "Port number"),
        "L": ("--local-forward", "Local port forwarding"),
        "R": ("--remote-forward", "Remote port forwarding"),
        "D": ("--dynamic-forward", "Dynamic port forwarding"),
        "N": ("--no-shell", "No remote commands (forwarding only)"),
        "v": ("--verbose", "Verbose mode"),
        "q": ("--quiet", "Quiet mode"),
        "A": ("--forward-agent", "Forward agent connection"),
        "X": ("--forward-x11", "Forward X11"),
        "t": ("--request-tty", "Force TTY allocation"),
    },
    "find": {
        "L": ("--follow", "Follow symbolic links"),
        "P": ("--no-follow", "Never follow symbolic links"),
        "H": ("--follow-args", "Follow symlinks only for args"),
    },
    "npm": {
        "g": ("--global", "Install globally"),
        "D": ("--save-dev", "Save as devDependency"),
        "E": ("--save-exact", "Save exact version"),
        "S": ("--save", "Save to dependencies"),
        "y": ("--yes", "Automatic yes to prompts"),
    },
    "ps": {
        "a": ("--all", "All processes (same terminal)"),
        "u": ("--user", "User-oriented format"),
        "x": ("--no-tty", "Include processes without TTY"),
        "e": ("--everyone", "All processes"),
        "f": ("--full", "Full format listing"),
        "l": ("--long", "Long format"),
    },
    "chmod": {
        "R": ("--recursive", "Change recursively"),
        "v": ("--verbose", "Verbose output"),
        "c": ("--changes", "Report changes"),
        "f": ("--silent", "Suppress error messages"),
    },
    "rsync": {
        "a": ("--archive", "Archive mode (recursive + preserve)"),
        "v": ("--verbose", "Verbose"),
        "z": ("--compress", "Compress during transfer"),
        "r": ("--recursive", "Recursive"),
        "n": ("--dry-run", "Dry run"),
        "e": ("--rsh", "Remote shell to use"),
        "P": ("--progress --partial", "Progress + partial transfers"),
        "h": ("--human-readable", "Human-readable sizes"),
        "u": ("--update", "Skip files newer on receiver"),
        "x": ("--one-file-system", "Don't cross filesystem boundaries"),
    },
}

# Common argument words for roots without a dedicated corpus
GLOBAL_WORDS = (
    "install", "uninstall", "update", "upgrade", "remove", "delete",
    "create", "list", "show", "status", "start", "stop", "restart",
    "enable", "disable", "build", "run", "test", "deploy", "init",
    "config", "version", "origin", "upstream", "main", "master",
    "develop", "localhost", "head", "latest", "default", "staging",
    "production", "feature",
)

# Whole-command typos, keyed by the lowercased, trimmed command
COMMAND_TYPOS = {
    "gitp ull": "git pull",
    "gitp uhs": "git push",
    "git satus": "git status",
    "git stauts": "git status",
    "git commti": "git commit",
    "git chekcout": "git checkout",
    "go bulid": "go build",
    "go buld": "go build",
    "go tset": "go test",
    "go isntall": "go install",
    "npm isntall": "npm install",
    "pip isntall": "pip install",
}

# Root-token typos
ROOT_TYPOS = {
    "gti": "git",
    "tit": "git",
    "gi": "git",
    "gt": "git",
    "gut": "git",
    "docer": "docker",
    "doccker": "docker",
    "doker": "docker",
    "dcoekr": "docker",
    "sl": "ls",
    "ks": "ls",
    "lss": "ls",
    "cd..": "cd ..",
    "cd-": "cd -",
    "grpe": "grep",
    "grp": "grep",
    "gr": "grep",
    "tial": "tail",
    "taill": "tail",
    "mkr": "mkdir",
    "makedir": "mkdir",
    "mkidr": "mkdir",
    "npn": "npm",
    "nom": "npm",
    "pni": "npm install",
    "pthon": "python",
    "pyton": "python",
    "pyp": "pip",
    "pp": "pip",
}

# Commands that can destroy a system, matched exactly or as a command prefix
DANGEROUS_COMMANDS = (
    "rm -rf /",
    "rm -rf /*",
    "rm -fr /",
    "rm -rf --no-preserve-root /",
    "> /dev/sda",
    "mkfs.ext3 /dev/sda",
    "mkfs.ext4 /dev/sda",
    "dd if=/dev/zero of=/dev/sda",
    "dd if=/dev/random of=/dev/sda",
    ":(){ :|:& };:",
    "chmod -R 777 /",
    "chown -R nobody /",
    "mv / /dev/null",
)

MODERN_ALTERNATIVES = {
    "ls": ("exa", "lsd"),
    "cat": ("bat", "batcat"),
    "find": ("fd",),
    "grep": ("ripgrep", "rg"),
    "ps": ("procs",),
    "top": ("htop", "btop"),
    "du": ("dust",),
    "df": ("duf",),
}
