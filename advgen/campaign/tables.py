"""Random tables for offline adventure generation, keyed by genre."""

from ..game.settings import Difficulty, Genre

LOCATIONS = {
    Genre.FANTASY: [
        "The sunken elven city of Ael'thara",
        "A crumbling watchtower on the Greywind Pass",
        "The Whispering Woods beyond the river Vell",
        "The dwarven forge-halls beneath Mount Kharn",
        "A floating market above the Azure Lake",
        "The ruined abbey of Saint Orwen",
    ],
    Genre.SCIFI: [
        "Derelict freighter Kestrel-9 drifting past Europa",
        "The neon undercity of New Kowloon",
        "A terraforming station on the edge of a dust storm",
        "Orbital ring habitat Meridian",
        "An abandoned research outpost on a tidally locked moon",
        "The asteroid mining colony Ceres Deep",
    ],
    Genre.HORROR: [
        "Blackmoor Asylum, closed since 1952",
        "A fog-bound fishing village on the northern coast",
        "The Ashgrove family estate",
        "An overgrown cemetery behind St. Agatha's church",
        "A motel off a highway no map remembers",
        "The flooded lower levels of the old mine",
    ],
}

CHARACTERS = {
    Genre.FANTASY: [
        "Elara, a half-elf ranger with a grudge",
        "Brother Tomas, a disgraced cleric",
        "Grizzle, a goblin merchant of dubious goods",
        "Queen Maelis of the river court",
        "Korrin Ashblade, a retired dragon hunter",
        "Wren, a street urchin who hears the dead",
        "The Hooded Archivist",
    ],
    Genre.SCIFI: [
        "Captain Ilya Serrano, smuggler with debts",
        "Unit K-7, a maintenance android with a secret",
        "Dr. Amaya Okafor, xenobiologist",
        "Director Vance of the Helix Corporation",
        "Jax, a cyber-augmented courier",
        "ORACLE, the station's failing AI",
        "Sergeant Reyes, last of the colonial marines",
    ],
    Genre.HORROR: [
        "Father Malachy, the village priest",
        "Edith Ashgrove, the last heir",
        "A caretaker who never sleeps",
        "Dr. Howard Lyle, paranormal investigator",
        "The girl in the yellow raincoat",
        "Silas, a hitchhiker who knows your name",
        "Nurse Marlowe, who still does her rounds",
    ],
}

OBJECTIVES = {
    Genre.FANTASY: [
        "Recover the stolen Crown of Embers before the solstice",
        "Escort a young oracle safely to the capital",
        "Break the curse that keeps the valley in eternal winter",
        "Find out who poisoned the river spirits",
        "Slay the wyrm that nests in the old mines",
    ],
    Genre.SCIFI: [
        "Retrieve the black box before the salvage crews arrive",
        "Stop a rogue AI from venting the habitat's atmosphere",
        "Smuggle a refugee scientist past the corporate blockade",
        "Find the source of the distress signal on the dark side",
        "Restore power before the station falls out of orbit",
    ],
    Genre.HORROR: [
        "Survive until dawn",
        "Find the missing children before the third night",
        "Lay the restless spirit to rest",
        "Discover what really happened to the previous owners",
        "Escape before the tide cuts the island off",
    ],
}

CHALLENGES = {
    Genre.FANTASY: [
        "Goblin raiding party",
        "Enchanted maze of thorns",
        "Rival adventuring company",
        "Treacherous mountain crossing",
        "Riddle-bound stone guardian",
        "Bandit toll on the king's road",
        "Cursed treasure",
    ],
    Genre.SCIFI: [
        "Hull breach in the cargo bay",
        "Hostile security drones",
        "Corporate bounty hunters",
        "Radiation storm",
        "Encrypted blast doors",
        "Parasitic alien spores",
        "Failing life support",
    ],
    Genre.HORROR: [
        "Something in the walls",
        "A door that should not be opened",
        "Whispers that mimic familiar voices",
        "Power failure at midnight",
        "A possessed townsperson",
        "Mirrors that show the wrong room",
        "A ritual that must not be completed",
    ],
}

CHALLENGE_QUALIFIERS = {
    Difficulty.EASY: ["manageable", "minor", "clumsy"],
    Difficulty.MEDIUM: ["dangerous", "persistent", "cunning"],
    Difficulty.HARD: ["deadly", "relentless", "overwhelming"],
}
