"""Display colors for languages (GitHub linguist palette)."""

DEFAULT_LANGUAGE_COLOR = "#A3A3A3"
POLYGLOT_COLOR = "#FFFFFF"

LANGUAGE_COLORS: dict[str, str] = {
    # Web & frontend
    "TypeScript": "#3178C6",
    "JavaScript": "#F7DF1E",
    "HTML": "#e34c26",
    "CSS": "#563d7c",
    "Vue": "#41b883",
    "Svelte": "#ff3e00",
    "SCSS": "#c6538c",
    "Less": "#1d365d",
    "Astro": "#ff5a03",
    "MDX": "#1b1f24",
    # Systems
    "Rust": "#dea584",
    "C": "#555555",
    "C++": "#f34b7d",
    "C#": "#178600",
    "Go": "#00ADD8",
    "Zig": "#f7a41d",
    "Assembly": "#6E4C13",
    "Objective-C": "#438eff",
    # JVM
    "Java": "#b07219",
    "Kotlin": "#A97BFF",
    "Scala": "#c22d40",
    "Groovy": "#4298b8",
    "Clojure": "#db5855",
    # Scripting & dynamic
    "Python": "#3572A5",
    "Ruby": "#701516",
    "PHP": "#4F5D95",
    "Perl": "#0298c3",
    "Lua": "#000080",
    "R": "#198CE7",
    "Julia": "#a270ba",
    "Elixir": "#6e4a7e",
    "Erlang": "#B83998",
    "Haskell": "#5e5086",
    "OCaml": "#3be133",
    # Mobile
    "Swift": "#F05138",
    "Dart": "#00B4AB",
    "Objective-C++": "#6866fb",
    # Data & ML
    "Jupyter Notebook": "#DA5B0B",
    "MATLAB": "#e16737",
    "SAS": "#B34936",
    # Shell & config
    "Shell": "#89e051",
    "PowerShell": "#012456",
    "Dockerfile": "#384d54",
    "Makefile": "#427819",
    "Nix": "#7e7eff",
    "HCL": "#844fba",
    # Query languages
    "SQL": "#e38c00",
    "PLpgSQL": "#336790",
    "TSQL": "#e38c00",
    "GraphQL": "#e10098",
    # Markup
    "Markdown": "#083fa1",
    "TeX": "#3D6117",
    "Org": "#77aa99",
    # Everything else
    "F#": "#b845fc",
    "Crystal": "#000100",
    "Nim": "#ffc200",
    "V": "#4f87c4",
    "Solidity": "#AA6746",
    "Move": "#4a137a",
    "Cairo": "#ff4c00",
    "WebAssembly": "#654ff0",
    "WASM": "#654ff0",
    "CoffeeScript": "#244776",
    "Elm": "#60B5CC",
    "PureScript": "#1D222D",
    "ReasonML": "#ff5847",
    "Raku": "#0000fb",
    "Fortran": "#4d41b1",
    "COBOL": "#005ca5",
    "Ada": "#02f88c",
    "D": "#ba595e",
    "Vala": "#a56de2",
    "Hack": "#878787",
    "ActionScript": "#882B0F",
}


def language_color(name: str) -> str:
    if name == "Polyglot":
        return POLYGLOT_COLOR
    return LANGUAGE_COLORS.get(name, DEFAULT_LANGUAGE_COLOR)
