"""Legacy ruleset bundle (System Reference Document 5.1).

In this version species carry fixed ability score increases, backgrounds
grant languages, and prepared casters (cleric, druid, wizard, paladin,
ranger) compute their prepared spell count from their ability modifier.
Only the "known" casters (bard, sorcerer, warlock) list explicit counts.
"""

from __future__ import annotations

from charsheet.models.enums import (
    Ability,
    CasterKind,
    ClassName,
    RulesetId,
    Size,
    SpellChangeEvent,
)
from charsheet.models.ruleset import (
    Background,
    Choice,
    ClassDef,
    Lineage,
    SpellcastingEnabled,
    Species,
    Subclass,
    Trait,
)
from charsheet.rules.progression import Ruleset, build_slot_curve
from charsheet.rules.tables import (
    FULL_CASTER_SLOTS,
    HALF_CASTER_SLOTS,
    NATIVE_CANTRIPS,
    NO_CANTRIPS,
    PACT_SLOTS,
    SUBCLASS_CASTER_CANTRIPS,
    SUBCLASS_CASTER_PREPARED,
    THIRD_CASTER_SLOTS,
    build_progression,
    level_rows,
    traits,
)


_INSTRUMENTS = ("bagpipes", "drum", "dulcimer", "flute", "lute", "lyre", "horn", "pan flute", "shawm", "viol")
_ARTISAN_TOOLS = (
    "alchemist's supplies", "brewer's supplies", "calligrapher's supplies", "carpenter's tools",
    "cartographer's tools", "cobbler's tools", "cook's utensils", "glassblower's tools",
    "jeweler's tools", "leatherworker's tools", "mason's tools", "painter's supplies",
    "potter's tools", "smith's tools", "tinker's tools", "weaver's tools", "woodcarver's tools",
)
_GAMING_SETS = ("dice set", "playing card set")
_ALL_SKILLS = (
    "acrobatics", "animal handling", "arcana", "athletics", "deception", "history", "insight",
    "intimidation", "investigation", "medicine", "nature", "perception", "performance",
    "persuasion", "religion", "sleight of hand", "stealth", "survival",
)


# =============================================================================
# Species
# =============================================================================

SPECIES: tuple[Species, ...] = (
    Species(
        name="dwarf",
        size=Size.MEDIUM,
        speed=25,
        ability_score_modifiers={Ability.CON: 2},
        traits=traits("Darkvision", "Dwarven Resilience", "Dwarven Combat Training", "Stonecunning"),
        lineages=(
            Lineage(
                name="hill dwarf",
                ability_score_modifiers={Ability.WIS: 1},
                traits=traits("Dwarven Toughness"),
            ),
            Lineage(
                name="mountain dwarf",
                ability_score_modifiers={Ability.STR: 2},
                traits=traits("Dwarven Armor Training"),
            ),
        ),
    ),
    Species(
        name="elf",
        size=Size.MEDIUM,
        speed=30,
        ability_score_modifiers={Ability.DEX: 2},
        traits=traits("Darkvision", "Keen Senses", "Fey Ancestry", "Trance"),
        lineages=(
            Lineage(
                name="high elf",
                ability_score_modifiers={Ability.INT: 1},
                traits=traits("Elf Weapon Training", "Cantrip", "Extra Language"),
            ),
            Lineage(
                name="wood elf",
                ability_score_modifiers={Ability.WIS: 1},
                traits=traits("Elf Weapon Training", "Fleet of Foot", "Mask of the Wild"),
            ),
            Lineage(
                name="drow",
                ability_score_modifiers={Ability.CHA: 1},
                traits=traits(
                    "Superior Darkvision",
                    "Sunlight Sensitivity",
                    "Drow Magic",
                    ("Faerie Fire", 3, "Cast faerie fire once per long rest."),
                    ("Darkness", 5, "Cast darkness once per long rest."),
                ),
            ),
        ),
    ),
    Species(
        name="halfling",
        size=Size.SMALL,
        speed=25,
        ability_score_modifiers={Ability.DEX: 2},
        traits=traits("Lucky", "Brave", "Halfling Nimbleness"),
        lineages=(
            Lineage(
                name="lightfoot",
                ability_score_modifiers={Ability.CHA: 1},
                traits=traits("Naturally Stealthy"),
            ),
            Lineage(
                name="stout",
                ability_score_modifiers={Ability.CON: 1},
                traits=traits("Stout Resilience"),
            ),
        ),
    ),
    Species(
        name="human",
        size=Size.MEDIUM,
        speed=30,
        ability_score_modifiers={ability: 1 for ability in Ability},
    ),
    Species(
        name="dragonborn",
        size=Size.MEDIUM,
        speed=30,
        ability_score_modifiers={Ability.STR: 2, Ability.CHA: 1},
        traits=traits("Draconic Ancestry", "Breath Weapon", "Damage Resistance"),
    ),
    Species(
        name="gnome",
        size=Size.SMALL,
        speed=25,
        ability_score_modifiers={Ability.INT: 2},
        traits=traits("Darkvision", "Gnome Cunning"),
        lineages=(
            Lineage(
                name="forest gnome",
                ability_score_modifiers={Ability.DEX: 1},
                traits=traits("Natural Illusionist", "Speak with Small Beasts"),
            ),
            Lineage(
                name="rock gnome",
                ability_score_modifiers={Ability.CON: 1},
                traits=traits("Artificer's Lore", "Tinker"),
            ),
            Lineage(
                name="deep gnome",
                ability_score_modifiers={Ability.DEX: 1},
                traits=traits("Superior Darkvision", "Stone Camouflage"),
            ),
        ),
    ),
    Species(
        name="half-elf",
        size=Size.MEDIUM,
        speed=30,
        description="Also raises two other ability scores of the player's choice by 1.",
        ability_score_modifiers={Ability.CHA: 2},
        traits=traits("Darkvision", "Fey Ancestry", "Skill Versatility"),
    ),
    Species(
        name="half-orc",
        size=Size.MEDIUM,
        speed=30,
        ability_score_modifiers={Ability.STR: 2, Ability.CON: 1},
        traits=traits("Darkvision", "Menacing", "Relentless Endurance", "Savage Attacks"),
    ),
    Species(
        name="tiefling",
        size=Size.MEDIUM,
        speed=30,
        ability_score_modifiers={Ability.CHA: 2, Ability.INT: 1},
        traits=traits(
            "Darkvision",
            "Hellish Resistance",
            "Infernal Legacy",
            ("Hellish Rebuke", 3, "Cast hellish rebuke as a 2nd-level spell once per long rest."),
            ("Darkness", 5, "Cast darkness once per long rest."),
        ),
    ),
)


# =============================================================================
# Classes
# =============================================================================

CLASSES: tuple[ClassDef, ...] = (
    ClassDef(
        name=ClassName.BARBARIAN,
        hit_die=12,
        primary_abilities=(Ability.STR, Ability.CON),
        saving_throws=(Ability.STR, Ability.CON),
        armor_proficiencies=("light", "medium", "shields"),
        weapon_proficiencies=("simple", "martial"),
        skill_choices=Choice(
            choose=2,
            options=("animal handling", "athletics", "intimidation", "nature", "perception", "survival"),
        ),
        traits=traits(
            "Rage",
            "Unarmored Defense",
            ("Reckless Attack", 2),
            ("Danger Sense", 2),
            ("Extra Attack", 5),
            ("Fast Movement", 5),
            ("Feral Instinct", 7),
            ("Brutal Critical", 9),
            ("Relentless Rage", 11),
            ("Persistent Rage", 15),
            ("Indomitable Might", 18),
            ("Primal Champion", 20),
        ),
        subclasses=(
            Subclass(
                name="path of the berserker",
                traits=traits(("Frenzy", 3), ("Mindless Rage", 6), ("Intimidating Presence", 10), ("Retaliation", 14)),
            ),
            Subclass(name="path of the totem warrior"),
        ),
    ),
    ClassDef(
        name=ClassName.BARD,
        hit_die=8,
        primary_abilities=(Ability.CHA, Ability.DEX),
        saving_throws=(Ability.DEX, Ability.CHA),
        armor_proficiencies=("light",),
        weapon_proficiencies=("simple", "hand crossbow", "longsword", "rapier", "shortsword"),
        tool_proficiencies=(Choice(choose=3, options=_INSTRUMENTS),),
        skill_choices=Choice(choose=3, options=_ALL_SKILLS),
        traits=traits(
            "Spellcasting",
            "Bardic Inspiration",
            ("Jack of All Trades", 2),
            ("Song of Rest", 2),
            ("Expertise", 3),
            ("Font of Inspiration", 5),
            ("Countercharm", 6),
            ("Magical Secrets", 10),
            ("Superior Inspiration", 20),
        ),
        subclasses=(
            Subclass(
                name="college of lore",
                traits=traits(("Bonus Proficiencies", 3), ("Cutting Words", 3), ("Additional Magical Secrets", 6), ("Peerless Skill", 14)),
            ),
            Subclass(name="college of valor"),
        ),
        spellcasting=SpellcastingEnabled(
            kind=CasterKind.FULL, ability=Ability.CHA, change_prepared=SpellChangeEvent.LEVEL_UP
        ),
    ),
    ClassDef(
        name=ClassName.CLERIC,
        hit_die=8,
        primary_abilities=(Ability.WIS,),
        saving_throws=(Ability.WIS, Ability.CHA),
        armor_proficiencies=("light", "medium", "heavy", "shields"),
        weapon_proficiencies=("simple",),
        skill_choices=Choice(choose=2, options=("history", "insight", "medicine", "persuasion", "religion")),
        traits=traits(
            "Spellcasting",
            ("Channel Divinity", 2),
            ("Turn Undead", 2),
            ("Destroy Undead", 5),
            ("Divine Intervention", 10),
        ),
        subclasses=(
            Subclass(name="knowledge domain"),
            Subclass(
                name="life domain",
                traits=traits(
                    ("Bonus Proficiency", 1),
                    ("Disciple of Life", 1),
                    ("Preserve Life", 2),
                    ("Blessed Healer", 6),
                    ("Divine Strike", 8),
                    ("Supreme Healing", 17),
                ),
            ),
            Subclass(name="light domain"),
            Subclass(name="nature domain"),
            Subclass(name="tempest domain"),
            Subclass(name="trickery domain"),
            Subclass(name="war domain"),
        ),
        subclass_level=1,
        spellcasting=SpellcastingEnabled(
            kind=CasterKind.FULL, ability=Ability.WIS, change_prepared=SpellChangeEvent.LONG_REST
        ),
    ),
    ClassDef(
        name=ClassName.DRUID,
        hit_die=8,
        primary_abilities=(Ability.WIS,),
        saving_throws=(Ability.INT, Ability.WIS),
        armor_proficiencies=("light (nonmetal)", "medium (nonmetal)", "shields (nonmetal)"),
        weapon_proficiencies=(
            "clubs", "daggers", "darts", "javelins", "maces", "quarterstaffs", "scimitars", "sickles", "slings", "spears",
        ),
        tool_proficiencies=("herbalism kit",),
        skill_choices=Choice(
            choose=2,
            options=("arcana", "animal handling", "insight", "medicine", "nature", "perception", "religion", "survival"),
        ),
        traits=traits("Druidic", "Spellcasting", ("Wild Shape", 2), ("Timeless Body", 18), ("Beast Spells", 18), ("Archdruid", 20)),
        subclasses=(
            Subclass(
                name="circle of the land",
                traits=traits(("Bonus Cantrip", 2), ("Natural Recovery", 2), ("Circle Spells", 3), ("Land's Stride", 6), ("Nature's Ward", 10), ("Nature's Sanctuary", 14)),
            ),
            Subclass(name="circle of the moon"),
        ),
        subclass_level=2,
        spellcasting=SpellcastingEnabled(
            kind=CasterKind.FULL, ability=Ability.WIS, change_prepared=SpellChangeEvent.LONG_REST
        ),
    ),
    ClassDef(
        name=ClassName.FIGHTER,
        hit_die=10,
        primary_abilities=(Ability.STR, Ability.DEX, Ability.CON),
        saving_throws=(Ability.STR, Ability.CON),
        armor_proficiencies=("light", "medium", "heavy", "shields"),
        weapon_proficiencies=("simple", "martial"),
        skill_choices=Choice(
            choose=2,
            options=("acrobatics", "animal handling", "athletics", "history", "insight", "intimidation", "perception", "survival"),
        ),
        traits=traits(
            "Fighting Style",
            "Second Wind",
            ("Action Surge", 2),
            ("Extra Attack", 5),
            ("Indomitable", 9),
        ),
        subclasses=(
            Subclass(
                name="champion",
                traits=traits(("Improved Critical", 3), ("Remarkable Athlete", 7), ("Additional Fighting Style", 10), ("Superior Critical", 15), ("Survivor", 18)),
            ),
            Subclass(name="battle master"),
            Subclass(
                name="eldritch knight",
                traits=traits(("Spellcasting", 3), ("Weapon Bond", 3), ("War Magic", 7), ("Eldritch Strike", 10), ("Arcane Charge", 15), ("Improved War Magic", 18)),
            ),
        ),
        spellcasting=SpellcastingEnabled(
            kind=CasterKind.THIRD,
            ability=Ability.INT,
            change_prepared=SpellChangeEvent.LEVEL_UP,
            granting_subclasses=("eldritch knight",),
        ),
    ),
    ClassDef(
        name=ClassName.MONK,
        hit_die=8,
        primary_abilities=(Ability.DEX, Ability.WIS),
        saving_throws=(Ability.STR, Ability.DEX),
        weapon_proficiencies=("simple", "shortsword"),
        tool_proficiencies=(Choice(choose=1, options=("artisan's tools", "musical instrument")),),
        skill_choices=Choice(
            choose=2, options=("acrobatics", "athletics", "history", "insight", "religion", "stealth")
        ),
        traits=traits(
            "Unarmored Defense",
            "Martial Arts",
            ("Ki", 2),
            ("Unarmored Movement", 2),
            ("Deflect Missiles", 3),
            ("Slow Fall", 4),
            ("Extra Attack", 5),
            ("Stunning Strike", 5),
            ("Evasion", 7),
            ("Diamond Soul", 14),
            ("Perfect Self", 20),
        ),
        subclasses=(
            Subclass(
                name="way of the open hand",
                traits=traits(("Open Hand Technique", 3), ("Wholeness of Body", 6), ("Tranquility", 11), ("Quivering Palm", 17)),
            ),
            Subclass(name="way of shadow"),
            Subclass(name="way of the four elements"),
        ),
    ),
    ClassDef(
        name=ClassName.PALADIN,
        hit_die=10,
        primary_abilities=(Ability.STR, Ability.CHA),
        saving_throws=(Ability.WIS, Ability.CHA),
        armor_proficiencies=("light", "medium", "heavy", "shields"),
        weapon_proficiencies=("simple", "martial"),
        skill_choices=Choice(
            choose=2, options=("athletics", "insight", "intimidation", "medicine", "persuasion", "religion")
        ),
        traits=traits(
            "Divine Sense",
            "Lay on Hands",
            ("Fighting Style", 2),
            ("Spellcasting", 2),
            ("Divine Smite", 2),
            ("Divine Health", 3),
            ("Extra Attack", 5),
            ("Aura of Protection", 6),
            ("Aura of Courage", 10),
            ("Improved Divine Smite", 11),
            ("Cleansing Touch", 14),
        ),
        subclasses=(
            Subclass(
                name="oath of devotion",
                traits=traits(("Sacred Weapon", 3), ("Turn the Unholy", 3), ("Aura of Devotion", 7), ("Purity of Spirit", 15), ("Holy Nimbus", 20)),
            ),
            Subclass(name="oath of the ancients"),
            Subclass(name="oath of vengeance"),
        ),
        spellcasting=SpellcastingEnabled(
            kind=CasterKind.HALF,
            ability=Ability.CHA,
            change_prepared=SpellChangeEvent.LONG_REST,
            notes="half-caster progression",
        ),
    ),
    ClassDef(
        name=ClassName.RANGER,
        hit_die=10,
        primary_abilities=(Ability.DEX, Ability.WIS),
        saving_throws=(Ability.STR, Ability.DEX),
        armor_proficiencies=("light", "medium", "shields"),
        weapon_proficiencies=("simple", "martial"),
        skill_choices=Choice(
            choose=3,
            options=("animal handling", "athletics", "insight", "investigation", "nature", "perception", "stealth", "survival"),
        ),
        traits=traits(
            "Favored Enemy",
            "Natural Explorer",
            ("Fighting Style", 2),
            ("Spellcasting", 2),
            ("Primeval Awareness", 3),
            ("Extra Attack", 5),
            ("Land's Stride", 8),
            ("Hide in Plain Sight", 10),
            ("Vanish", 14),
            ("Feral Senses", 18),
            ("Foe Slayer", 20),
        ),
        subclasses=(
            Subclass(
                name="hunter",
                traits=traits(("Hunter's Prey", 3), ("Defensive Tactics", 7), ("Multiattack", 11), ("Superior Hunter's Defense", 15)),
            ),
            Subclass(name="beast master"),
        ),
        spellcasting=SpellcastingEnabled(
            kind=CasterKind.HALF,
            ability=Ability.WIS,
            change_prepared=SpellChangeEvent.LEVEL_UP,
            notes="half-caster progression",
        ),
    ),
    ClassDef(
        name=ClassName.ROGUE,
        hit_die=8,
        primary_abilities=(Ability.DEX,),
        saving_throws=(Ability.DEX, Ability.INT),
        armor_proficiencies=("light",),
        weapon_proficiencies=("simple", "hand crossbow", "longsword", "rapier", "shortsword"),
        tool_proficiencies=("thieves' tools",),
        skill_choices=Choice(
            choose=4,
            options=(
                "acrobatics", "athletics", "deception", "insight", "intimidation", "investigation",
                "perception", "performance", "persuasion", "sleight of hand", "stealth",
            ),
        ),
        traits=traits(
            "Expertise",
            "Sneak Attack",
            "Thieves' Cant",
            ("Cunning Action", 2),
            ("Uncanny Dodge", 5),
            ("Evasion", 7),
            ("Reliable Talent", 11),
            ("Blindsense", 14),
            ("Slippery Mind", 15),
            ("Elusive", 18),
            ("Stroke of Luck", 20),
        ),
        subclasses=(
            Subclass(
                name="thief",
                traits=traits(("Fast Hands", 3), ("Second-Story Work", 3), ("Supreme Sneak", 9), ("Use Magic Device", 13), ("Thief's Reflexes", 17)),
            ),
            Subclass(name="assassin"),
            Subclass(
                name="arcane trickster",
                traits=traits(("Spellcasting", 3), ("Mage Hand Legerdemain", 3), ("Magical Ambush", 9), ("Versatile Trickster", 13), ("Spell Thief", 17)),
            ),
        ),
        spellcasting=SpellcastingEnabled(
            kind=CasterKind.THIRD,
            ability=Ability.INT,
            change_prepared=SpellChangeEvent.LEVEL_UP,
            granting_subclasses=("arcane trickster",),
        ),
    ),
    ClassDef(
        name=ClassName.SORCERER,
        hit_die=6,
        primary_abilities=(Ability.CHA,),
        saving_throws=(Ability.CON, Ability.CHA),
        weapon_proficiencies=("dagger", "dart", "sling", "quarterstaff", "light crossbow"),
        skill_choices=Choice(
            choose=2, options=("arcana", "deception", "insight", "intimidation", "persuasion", "religion")
        ),
        traits=traits(
            "Spellcasting",
            ("Font of Magic", 2),
            ("Metamagic", 3),
            ("Sorcerous Restoration", 20),
        ),
        subclasses=(
            Subclass(
                name="draconic bloodline",
                traits=traits(("Dragon Ancestor", 1), ("Draconic Resilience", 1), ("Elemental Affinity", 6), ("Dragon Wings", 14), ("Draconic Presence", 18)),
            ),
            Subclass(name="wild magic"),
        ),
        subclass_level=1,
        spellcasting=SpellcastingEnabled(
            kind=CasterKind.FULL, ability=Ability.CHA, change_prepared=SpellChangeEvent.LEVEL_UP
        ),
    ),
    ClassDef(
        name=ClassName.WARLOCK,
        hit_die=8,
        primary_abilities=(Ability.CHA,),
        saving_throws=(Ability.WIS, Ability.CHA),
        armor_proficiencies=("light",),
        weapon_proficiencies=("simple",),
        skill_choices=Choice(
            choose=2,
            options=("arcana", "deception", "history", "intimidation", "investigation", "nature", "religion"),
        ),
        traits=traits(
            "Pact Magic",
            ("Eldritch Invocations", 2),
            ("Pact Boon", 3),
            ("Mystic Arcanum", 11),
            ("Eldritch Master", 20),
        ),
        subclasses=(
            Subclass(name="the archfey"),
            Subclass(
                name="the fiend",
                traits=traits(("Dark One's Blessing", 1), ("Dark One's Own Luck", 6), ("Fiendish Resilience", 10), ("Hurl Through Hell", 14)),
            ),
            Subclass(name="the great old one"),
        ),
        subclass_level=1,
        spellcasting=SpellcastingEnabled(
            kind=CasterKind.PACT,
            ability=Ability.CHA,
            change_prepared=SpellChangeEvent.LEVEL_UP,
            notes="pact magic progression",
        ),
    ),
    ClassDef(
        name=ClassName.WIZARD,
        hit_die=6,
        primary_abilities=(Ability.INT,),
        saving_throws=(Ability.INT, Ability.WIS),
        weapon_proficiencies=("dagger", "dart", "sling", "quarterstaff", "light crossbow"),
        skill_choices=Choice(
            choose=2, options=("arcana", "history", "insight", "investigation", "medicine", "religion")
        ),
        traits=traits("Spellcasting", "Arcane Recovery", ("Spell Mastery", 18), ("Signature Spells", 20)),
        subclasses=(
            Subclass(name="school of abjuration"),
            Subclass(name="school of conjuration"),
            Subclass(name="school of divination"),
            Subclass(name="school of enchantment"),
            Subclass(
                name="school of evocation",
                traits=traits(("Evocation Savant", 2), ("Sculpt Spells", 2), ("Potent Cantrip", 6), ("Empowered Evocation", 10), ("Overchannel", 14)),
            ),
            Subclass(name="school of illusion"),
            Subclass(name="school of necromancy"),
            Subclass(name="school of transmutation"),
        ),
        subclass_level=2,
        spellcasting=SpellcastingEnabled(
            kind=CasterKind.FULL, ability=Ability.INT, change_prepared=SpellChangeEvent.LONG_REST
        ),
    ),
)


# =============================================================================
# Backgrounds
# =============================================================================


def _feature(name: str, summary: str) -> tuple[Trait, ...]:
    return (Trait(name=name, description=summary),)


BACKGROUNDS: tuple[Background, ...] = (
    Background(
        name="acolyte",
        skill_proficiencies=("insight", "religion"),
        additional_languages=2,
        equipment=("holy symbol", "prayer book or prayer wheel", "5 sticks of incense", "vestments", "common clothes", "15 gp"),
        traits=_feature("Shelter of the Faithful", "Free support and lodging at a temple of your faith."),
    ),
    Background(
        name="charlatan",
        skill_proficiencies=("deception", "sleight of hand"),
        tool_proficiencies=("disguise kit", "forgery kit"),
        equipment=("fine clothes", "disguise kit", "con tools", "15 gp"),
        traits=_feature("False Identity", "A second identity with documentation, acquaintances and disguises."),
    ),
    Background(
        name="criminal",
        skill_proficiencies=("deception", "stealth"),
        tool_proficiencies=(Choice(choose=1, options=_GAMING_SETS), "thieves' tools"),
        equipment=("crowbar", "dark common clothes with hood", "15 gp"),
        traits=_feature("Criminal Contact", "A reliable contact within the criminal underworld."),
    ),
    Background(
        name="entertainer",
        skill_proficiencies=("acrobatics", "performance"),
        tool_proficiencies=(Choice(choose=1, options=_INSTRUMENTS), "disguise kit"),
        equipment=("musical instrument", "favor of an admirer", "costume", "15 gp"),
        traits=_feature("By Popular Demand", "A place to perform, with free lodging and modest food."),
    ),
    Background(
        name="folk hero",
        skill_proficiencies=("animal handling", "survival"),
        tool_proficiencies=(Choice(choose=1, options=_ARTISAN_TOOLS), "vehicles (land)"),
        equipment=("artisan's tools", "shovel", "iron pot", "common clothes", "10 gp"),
        traits=_feature("Rustic Hospitality", "Common folk will shelter you and hide you among them."),
    ),
    Background(
        name="guild artisan",
        skill_proficiencies=("insight", "persuasion"),
        tool_proficiencies=(Choice(choose=1, options=_ARTISAN_TOOLS),),
        additional_languages=1,
        equipment=("artisan's tools", "letter of introduction from your guild", "traveler's clothes", "15 gp"),
        traits=_feature("Guild Membership", "Access to guild facilities, contacts and legal support."),
    ),
    Background(
        name="hermit",
        skill_proficiencies=("medicine", "religion"),
        tool_proficiencies=("herbalism kit",),
        additional_languages=1,
        equipment=("scroll case of notes", "winter blanket", "common clothes", "herbalism kit", "5 gp"),
        traits=_feature("Discovery", "A unique and powerful insight uncovered during seclusion."),
    ),
    Background(
        name="noble",
        skill_proficiencies=("history", "persuasion"),
        tool_proficiencies=(Choice(choose=1, options=_GAMING_SETS),),
        additional_languages=1,
        equipment=("fine clothes", "signet ring", "scroll of pedigree", "25 gp"),
        traits=_feature("Position of Privilege", "High social standing eases audiences with nobles."),
    ),
    Background(
        name="outlander",
        skill_proficiencies=("athletics", "survival"),
        tool_proficiencies=(Choice(choose=1, options=_INSTRUMENTS),),
        additional_languages=1,
        equipment=("staff", "hunting trap", "trophy from an animal", "traveler's clothes", "10 gp"),
        traits=_feature("Wanderer", "Excellent memory for geography; find food and water for your group."),
    ),
    Background(
        name="sage",
        skill_proficiencies=("arcana", "history"),
        additional_languages=2,
        equipment=("bottle of black ink", "quill", "small knife", "letter from a dead colleague", "common clothes", "10 gp"),
        traits=_feature("Researcher", "You usually know where to obtain a piece of lore."),
    ),
    Background(
        name="sailor",
        skill_proficiencies=("athletics", "perception"),
        tool_proficiencies=("navigator's tools", "vehicles (water)"),
        equipment=("belaying pin (club)", "50 feet of silk rope", "lucky charm", "common clothes", "10 gp"),
        traits=_feature("Ship's Passage", "Free passage on a sailing ship for you and your companions."),
    ),
    Background(
        name="pirate",
        skill_proficiencies=("athletics", "perception"),
        tool_proficiencies=("navigator's tools", "vehicles (water)"),
        equipment=("belaying pin (club)", "50 feet of silk rope", "lucky charm", "common clothes", "10 gp"),
        traits=_feature("Bad Reputation", "Your notoriety lets you get away with minor crimes."),
    ),
    Background(
        name="soldier",
        skill_proficiencies=("athletics", "intimidation"),
        tool_proficiencies=(Choice(choose=1, options=_GAMING_SETS), "vehicles (land)"),
        equipment=("insignia of rank", "trophy from a fallen enemy", "bone dice or deck of cards", "common clothes", "10 gp"),
        traits=_feature("Military Rank", "Soldiers loyal to your former organization recognize your authority."),
    ),
    Background(
        name="urchin",
        skill_proficiencies=("sleight of hand", "stealth"),
        tool_proficiencies=("disguise kit", "thieves' tools"),
        equipment=("small knife", "map of your home city", "pet mouse", "token to remember your parents", "common clothes", "10 gp"),
        traits=_feature("City Secrets", "Travel through a city twice as fast via its alleys and passages."),
    ),
)


# =============================================================================
# Spell Progression
# =============================================================================

_KNOWN_SPELLS = (4, 5, 6, 7, 9, 10, 11, 12, 14, 15, 16, 16, 17, 17, 18, 18, 19, 20, 21, 22)

SPELL_TABLES = {
    ClassName.BARD: build_progression(
        cantrips=NATIVE_CANTRIPS[ClassName.BARD],
        slots=FULL_CASTER_SLOTS,
        prepared=_KNOWN_SPELLS,
    ),
    ClassName.CLERIC: build_progression(cantrips=NATIVE_CANTRIPS[ClassName.CLERIC], slots=FULL_CASTER_SLOTS),
    ClassName.DRUID: build_progression(cantrips=NATIVE_CANTRIPS[ClassName.DRUID], slots=FULL_CASTER_SLOTS),
    ClassName.PALADIN: build_progression(cantrips=NO_CANTRIPS, slots=HALF_CASTER_SLOTS),
    ClassName.RANGER: build_progression(cantrips=NO_CANTRIPS, slots=HALF_CASTER_SLOTS),
    ClassName.SORCERER: build_progression(
        cantrips=NATIVE_CANTRIPS[ClassName.SORCERER],
        slots=FULL_CASTER_SLOTS,
        prepared=_KNOWN_SPELLS,
    ),
    ClassName.WARLOCK: build_progression(
        cantrips=NATIVE_CANTRIPS[ClassName.WARLOCK],
        slots=PACT_SLOTS,
        prepared=(2, 3, 4, 5, 6, 7, 8, 9, 10, 10, 11, 11, 12, 12, 13, 13, 14, 14, 15, 15),
        with_arcanum=True,
    ),
    ClassName.WIZARD: build_progression(cantrips=NATIVE_CANTRIPS[ClassName.WIZARD], slots=FULL_CASTER_SLOTS),
}


SRD51 = Ruleset(
    id=RulesetId.SRD51,
    description="Legacy rules: System Reference Document 5.1",
    species=SPECIES,
    classes={class_def.name: class_def for class_def in CLASSES},
    backgrounds={background.name: background for background in BACKGROUNDS},
    spell_tables=SPELL_TABLES,
    slot_curves={
        CasterKind.FULL: build_slot_curve(level_rows(FULL_CASTER_SLOTS)),
        CasterKind.HALF: build_slot_curve(level_rows(HALF_CASTER_SLOTS)),
        CasterKind.THIRD: build_slot_curve(level_rows(THIRD_CASTER_SLOTS)),
    },
    subclass_caster_cantrips=SUBCLASS_CASTER_CANTRIPS,
    subclass_caster_prepared=SUBCLASS_CASTER_PREPARED,
)


__all__ = ["SRD51"]
