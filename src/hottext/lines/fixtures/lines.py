LINES = {
    "meta.welcome": [
        "Welcome to the greatest dungeon crawler of all time!",
    ],
    "combat.encounter": [
        "You encounter {{enemy}}!",
        "You stumble across {{enemy}}!",
        "Oh no! It's {{enemy}}!",
    ],
    "combat.death": [
        "You were killed by {{{enemy}}}.",
        "{{{enemy}}} got the better of you.",
    ],
    "loot.found": [
        "You found {{count}} gold.",
        "{{count}} gold coins glitter on the floor.",
    ],
}
