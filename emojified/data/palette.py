"""Symbol palette fingerprints are drawn from.

Every entry is a single code point with default emoji presentation, so a
rendered fingerprint never depends on variation selectors or ZWJ sequences.
Order is part of the fingerprint format: reordering, inserting or removing
entries changes every fingerprint ever produced.
"""

PALETTE: tuple[str, ...] = (
    # Animals
    "🐀", "🐁", "🐂", "🐃", "🐄", "🐅", "🐆", "🐇",
    "🐈", "🐉", "🐊", "🐋", "🐌", "🐍", "🐎", "🐏",
    "🐐", "🐑", "🐒", "🐓", "🐔", "🐕", "🐖", "🐗",
    "🐘", "🐙", "🐚", "🐛", "🐜", "🐝", "🐞", "🐟",
    "🐠", "🐡", "🐢", "🐣", "🐤", "🐥", "🐦", "🐧",
    "🐨", "🐩", "🐪", "🐫", "🐬", "🐭", "🐮", "🐯",
    "🐰", "🐱", "🐲", "🐳", "🐴", "🐵", "🐶", "🐷",
    "🐸", "🐹", "🐺", "🐻", "🐼", "🐽", "🐾",
    # Plants and food
    "🌰", "🌱", "🌲", "🌳", "🌴", "🌵", "🌷", "🌸",
    "🌹", "🌺", "🌻", "🌼", "🌽", "🌾", "🌿", "🍀",
    "🍁", "🍂", "🍃", "🍄", "🍅", "🍆", "🍇", "🍈",
    "🍉", "🍊", "🍋", "🍌", "🍍", "🍎", "🍏", "🍐",
    "🍑", "🍒", "🍓", "🍔", "🍕", "🍖", "🍗", "🍘",
    "🍙", "🍚", "🍛", "🍜", "🍝", "🍞", "🍟", "🍠",
    "🍡", "🍢", "🍣", "🍤", "🍥", "🍦", "🍧", "🍨",
    "🍩", "🍪", "🍫", "🍬", "🍭", "🍮", "🍯", "🍰",
    "🍱", "🍲", "🍳", "🍴", "🍵", "🍶", "🍷", "🍸",
    "🍹", "🍺", "🍻", "🍼",
    # Transport and places
    "🚀", "🚁", "🚂", "🚃", "🚄", "🚅", "🚆", "🚇",
    "🚈", "🚉", "🚊", "🚋", "🚌", "🚍", "🚎", "🚏",
    "🚐", "🚑", "🚒", "🚓", "🚔", "🚕", "🚖", "🚗",
    "🚘", "🚙", "🚚", "🚛", "🚜", "🚝", "🚞", "🚟",
    "🚠", "🚡", "🚢", "🚣", "🚤", "🚥", "🚦", "🚧",
    "🚨", "🚩", "🚪", "🚫", "🚬", "🚭", "🚮", "🚯",
    "🚰", "🚱", "🚲", "🚳", "🚴", "🚵", "🚶", "🚷",
    "🚸", "🚹", "🚺", "🚻", "🚼", "🚽", "🚾", "🚿",
    "🛀", "🛁", "🛂", "🛃", "🛄", "🛅",
    # Creatures, food and objects
    "🦀", "🦁", "🦂", "🦃", "🦄", "🦅", "🦆", "🦇",
    "🦈", "🦉", "🦊", "🦋", "🦌", "🦍", "🦎", "🦏",
    "🦐", "🦑", "🦒", "🦓", "🦔", "🦕", "🦖", "🦗",
    "🦘", "🦙", "🦚", "🦛", "🦜", "🦝", "🦞", "🦟",
    "🦠", "🦡", "🦢", "🦣", "🦤", "🦥", "🦦", "🦧",
    "🦨", "🦩", "🦪", "🦫", "🦬", "🦭", "🦮",
)

PALETTE_SIZE = len(PALETTE)
