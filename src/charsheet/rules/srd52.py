"""Current ruleset bundle (System Reference Document 5.2).

Species no longer raise ability scores; backgrounds grant a feat and name
the three abilities a character may raise. Every native spellcasting class
except the wizard lists an explicit prepared spell count. Fighters and
rogues have no spellcasting subclass.
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
        name="dragonborn",
        size=Size.MEDIUM,
        speed=30,
        traits=traits("Draconic Ancestry", "Breath Weapon", "Damage Resistance", "Darkvision", ("Draconic Flight", 5)),
    ),
    Species(
        name="dwarf",
        size=Size.MEDIUM,
        speed=30,
        traits=traits("Darkvision", "Dwarven Resilience", "Dwarven Toughness", ("Stonecunning", 1)),
    ),
    Species(
        name="elf",
        size=Size.MEDIUM,
        speed=30,
        traits=traits("Darkvision", "Elven Lineage", "Fey Ancestry", "Keen Senses", "Trance"),
        lineages=(
            Lineage(
                name="drow",
                traits=traits(
                    ("Dancing Lights", 1, "Know the dancing lights cantrip; darkvision extends to 120 feet."),
                    ("Faerie Fire", 3),
                    ("Darkness", 5),
                ),
            ),
            Lineage(
                name="high elf",
                traits=traits(
                    ("Prestidigitation", 1, "Know the prestidigitation cantrip; swap it after a long rest."),
                    ("Detect Magic", 3),
                    ("Misty Step", 5),
                ),
            ),
            Lineage(
                name="wood elf",
                traits=traits(
                    ("Druidcraft", 1, "Know the druidcraft cantrip; speed increases to 35 feet."),
                    ("Longstrider", 3),
                    ("Pass without Trace", 5),
                ),
            ),
        ),
    ),
    Species(
        name="gnome",
        size=Size.SMALL,
        speed=30,
        traits=traits("Darkvision", "Gnomish Cunning", "Gnomish Lineage"),
        lineages=(
            Lineage(name="forest gnome", traits=traits("Minor Illusion", "Speak with Animals")),
            Lineage(name="rock gnome", traits=traits("Mending", "Prestidigitation", "Tinker")),
        ),
    ),
    Species(
        name="goliath",
        size=Size.MEDIUM,
        speed=35,
        traits=traits("Giant Ancestry", ("Large Form", 5), "Powerful Build"),
    ),
    Species(
        name="halfling",
        size=Size.SMALL,
        speed=30,
        traits=traits("Brave", "Halfling Nimbleness", "Luck", "Naturally Stealthy"),
    ),
    Species(
        name="human",
        size=Size.MEDIUM,
        speed=30,
        description="Medium or Small, chosen when the species is selected.",
        traits=traits("Resourceful", "Skillful", "Versatile"),
    ),
    Species(
        name="orc",
        size=Size.MEDIUM,
        speed=30,
        traits=traits("Adrenaline Rush", "Darkvision", "Relentless Endurance"),
    ),
    Species(
        name="tiefling",
        size=Size.MEDIUM,
        speed=30,
        description="Medium or Small, chosen when the species is selected.",
        traits=traits("Darkvision", "Fiendish Legacy", "Otherworldly Presence"),
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
            "Weapon Mastery",
            ("Danger Sense", 2),
            ("Reckless Attack", 2),
            ("Primal Knowledge", 3),
            ("Extra Attack", 5),
            ("Fast Movement", 5),
            ("Feral Instinct", 7),
            ("Instinctive Pounce", 7),
            ("Brutal Strike", 9),
            ("Relentless Rage", 11),
            ("Persistent Rage", 15),
            ("Indomitable Might", 18),
            ("Primal Champion", 20),
        ),
        subclasses=(
            Subclass(
                name="path of the berserker",
                traits=traits(("Frenzy", 3), ("Mindless Rage", 6), ("Retaliation", 10), ("Intimidating Presence", 14)),
            ),
        ),
    ),
    ClassDef(
        name=ClassName.BARD,
        hit_die=8,
        primary_abilities=(Ability.CHA, Ability.DEX),
        saving_throws=(Ability.DEX, Ability.CHA),
        armor_proficiencies=("light",),
        weapon_proficiencies=("simple",),
        tool_proficiencies=(Choice(choose=3, options=_INSTRUMENTS),),
        skill_choices=Choice(choose=3, options=_ALL_SKILLS),
        traits=traits(
            "Bardic Inspiration",
            "Spellcasting",
            ("Expertise", 2),
            ("Jack of All Trades", 2),
            ("Font of Inspiration", 5),
            ("Countercharm", 7),
            ("Magical Secrets", 10),
            ("Superior Inspiration", 18),
            ("Words of Creation", 20),
        ),
        subclasses=(
            Subclass(
                name="college of lore",
                traits=traits(("Bonus Proficiencies", 3), ("Cutting Words", 3), ("Magical Discoveries", 6), ("Peerless Skill", 14)),
            ),
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
        armor_proficiencies=("light", "medium", "shields"),
        weapon_proficiencies=("simple",),
        skill_choices=Choice(choose=2, options=("history", "insight", "medicine", "persuasion", "religion")),
        traits=traits(
            "Spellcasting",
            "Divine Order",
            ("Channel Divinity", 2),
            ("Sear Undead", 5),
            ("Blessed Strikes", 7),
            ("Divine Intervention", 10),
            ("Greater Divine Intervention", 20),
        ),
        subclasses=(
            Subclass(
                name="life domain",
                traits=traits(("Disciple of Life", 3), ("Life Domain Spells", 3), ("Preserve Life", 3), ("Blessed Healer", 6), ("Supreme Healing", 17)),
            ),
        ),
        spellcasting=SpellcastingEnabled(
            kind=CasterKind.FULL, ability=Ability.WIS, change_prepared=SpellChangeEvent.LONG_REST
        ),
    ),
    ClassDef(
        name=ClassName.DRUID,
        hit_die=8,
        primary_abilities=(Ability.WIS,),
        saving_throws=(Ability.INT, Ability.WIS),
        armor_proficiencies=("light", "shields"),
        weapon_proficiencies=("simple",),
        tool_proficiencies=("herbalism kit",),
        skill_choices=Choice(
            choose=2,
            options=("arcana", "animal handling", "insight", "medicine", "nature", "perception", "religion", "survival"),
        ),
        traits=traits(
            "Druidic",
            "Primal Order",
            "Spellcasting",
            ("Wild Shape", 2),
            ("Wild Companion", 2),
            ("Wild Resurgence", 5),
            ("Elemental Fury", 7),
            ("Beast Spells", 18),
            ("Archdruid", 20),
        ),
        subclasses=(
            Subclass(
                name="circle of the land",
                traits=traits(("Circle of the Land Spells", 3), ("Land's Aid", 3), ("Natural Recovery", 6), ("Nature's Ward", 10), ("Nature's Sanctuary", 14)),
            ),
        ),
        spellcasting=SpellcastingEnabled(
            kind=CasterKind.FULL, ability=Ability.WIS, change_prepared=SpellChangeEvent.LONG_REST
        ),
    ),
    ClassDef(
        name=ClassName.FIGHTER,
        hit_die=10,
        primary_abilities=(Ability.STR, Ability.DEX),
        saving_throws=(Ability.STR, Ability.CON),
        armor_proficiencies=("light", "medium", "heavy", "shields"),
        weapon_proficiencies=("simple", "martial"),
        skill_choices=Choice(
            choose=2,
            options=(
                "acrobatics", "animal handling", "athletics", "history", "insight", "intimidation",
                "persuasion", "perception", "survival",
            ),
        ),
        traits=traits(
            "Fighting Style",
            "Second Wind",
            "Weapon Mastery",
            ("Action Surge", 2),
            ("Tactical Mind", 2),
            ("Extra Attack", 5),
            ("Tactical Shift", 5),
            ("Indomitable", 9),
            ("Tactical Master", 9),
            ("Studied Attacks", 13),
        ),
        subclasses=(
            Subclass(
                name="champion",
                traits=traits(("Improved Critical", 3), ("Remarkable Athlete", 3), ("Additional Fighting Style", 7), ("Heroic Warrior", 10), ("Superior Critical", 15), ("Survivor", 18)),
            ),
        ),
    ),
    ClassDef(
        name=ClassName.MONK,
        hit_die=8,
        primary_abilities=(Ability.DEX, Ability.WIS),
        saving_throws=(Ability.STR, Ability.DEX),
        weapon_proficiencies=("simple", "martial (light)"),
        tool_proficiencies=(Choice(choose=1, options=("artisan's tools", "musical instrument")),),
        skill_choices=Choice(
            choose=2, options=("acrobatics", "athletics", "history", "insight", "religion", "stealth")
        ),
        traits=traits(
            "Martial Arts",
            "Unarmored Defense",
            ("Monk's Focus", 2),
            ("Unarmored Movement", 2),
            ("Uncanny Metabolism", 2),
            ("Deflect Attacks", 3),
            ("Slow Fall", 4),
            ("Extra Attack", 5),
            ("Stunning Strike", 5),
            ("Evasion", 7),
            ("Disciplined Survivor", 14),
            ("Body and Mind", 20),
        ),
        subclasses=(
            Subclass(
                name="warrior of the open hand",
                traits=traits(("Open Hand Technique", 3), ("Wholeness of Body", 6), ("Fleet Step", 11), ("Quivering Palm", 17)),
            ),
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
            "Lay on Hands",
            "Spellcasting",
            "Weapon Mastery",
            ("Fighting Style", 2),
            ("Paladin's Smite", 2),
            ("Channel Divinity", 3),
            ("Extra Attack", 5),
            ("Faithful Steed", 5),
            ("Aura of Protection", 6),
            ("Abjure Foes", 9),
            ("Aura of Courage", 10),
            ("Radiant Strikes", 11),
            ("Restoring Touch", 14),
        ),
        subclasses=(
            Subclass(
                name="oath of devotion",
                traits=traits(("Sacred Weapon", 3), ("Aura of Devotion", 7), ("Smite of Protection", 15), ("Holy Nimbus", 20)),
            ),
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
            "Spellcasting",
            "Weapon Mastery",
            ("Deft Explorer", 2),
            ("Fighting Style", 2),
            ("Extra Attack", 5),
            ("Roving", 6),
            ("Expertise", 9),
            ("Tireless", 10),
            ("Relentless Hunter", 13),
            ("Nature's Veil", 14),
            ("Precise Hunter", 17),
            ("Feral Senses", 18),
            ("Foe Slayer", 20),
        ),
        subclasses=(
            Subclass(
                name="hunter",
                traits=traits(("Hunter's Lore", 3), ("Hunter's Prey", 3), ("Defensive Tactics", 7), ("Superior Hunter's Prey", 11), ("Superior Hunter's Defense", 15)),
            ),
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
        weapon_proficiencies=("simple", "martial (finesse or light)"),
        tool_proficiencies=("thieves' tools",),
        skill_choices=Choice(
            choose=4,
            options=(
                "acrobatics", "athletics", "deception", "insight", "intimidation", "investigation",
                "perception", "persuasion", "sleight of hand", "stealth",
            ),
        ),
        traits=traits(
            "Expertise",
            "Sneak Attack",
            "Thieves' Cant",
            "Weapon Mastery",
            ("Cunning Action", 2),
            ("Steady Aim", 3),
            ("Cunning Strike", 5),
            ("Uncanny Dodge", 5),
            ("Evasion", 7),
            ("Reliable Talent", 7),
            ("Improved Cunning Strike", 11),
            ("Devious Strikes", 14),
            ("Slippery Mind", 15),
            ("Elusive", 18),
            ("Stroke of Luck", 20),
        ),
        subclasses=(
            Subclass(
                name="thief",
                traits=traits(("Fast Hands", 3), ("Second-Story Work", 3), ("Supreme Sneak", 9), ("Use Magic Device", 13), ("Thief's Reflexes", 17)),
            ),
        ),
    ),
    ClassDef(
        name=ClassName.SORCERER,
        hit_die=6,
        primary_abilities=(Ability.CHA,),
        saving_throws=(Ability.CON, Ability.CHA),
        weapon_proficiencies=("simple",),
        skill_choices=Choice(
            choose=2, options=("arcana", "deception", "insight", "intimidation", "persuasion", "religion")
        ),
        traits=traits(
            "Spellcasting",
            "Innate Sorcery",
            ("Font of Magic", 2),
            ("Metamagic", 2),
            ("Sorcerous Restoration", 5),
            ("Sorcery Incarnate", 7),
            ("Arcane Apotheosis", 20),
        ),
        subclasses=(
            Subclass(
                name="draconic sorcery",
                traits=traits(("Draconic Resilience", 3), ("Draconic Spells", 3), ("Elemental Affinity", 6), ("Dragon Wings", 14), ("Dragon Companion", 18)),
            ),
        ),
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
            "Eldritch Invocations",
            "Pact Magic",
            ("Magical Cunning", 2),
            ("Contact Patron", 9),
            ("Mystic Arcanum", 11),
            ("Eldritch Master", 20),
        ),
        subclasses=(
            Subclass(
                name="fiend patron",
                traits=traits(("Dark One's Blessing", 3), ("Fiend Spells", 3), ("Dark One's Own Luck", 6), ("Fiendish Resilience", 10), ("Hurl Through Hell", 14)),
            ),
        ),
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
        weapon_proficiencies=("simple",),
        skill_choices=Choice(
            choose=2, options=("arcana", "history", "insight", "investigation", "medicine", "nature", "religion")
        ),
        traits=traits(
            "Spellcasting",
            "Ritual Adept",
            "Arcane Recovery",
            ("Scholar", 2),
            ("Memorize Spell", 5),
            ("Spell Mastery", 18),
            ("Signature Spells", 20),
        ),
        subclasses=(
            Subclass(
                name="evoker",
                traits=traits(("Evocation Savant", 3), ("Potent Cantrip", 3), ("Sculpt Spells", 6), ("Empowered Evocation", 10), ("Overchannel", 14)),
            ),
        ),
        spellcasting=SpellcastingEnabled(
            kind=CasterKind.FULL, ability=Ability.INT, change_prepared=SpellChangeEvent.LONG_REST
        ),
    ),
)


# =============================================================================
# Backgrounds
# =============================================================================

BACKGROUNDS: tuple[Background, ...] = (
    Background(
        name="acolyte",
        skill_proficiencies=("insight", "religion"),
        tool_proficiencies=("calligrapher's supplies",),
        ability_scores=(Ability.INT, Ability.WIS, Ability.CHA),
        feat="Magic Initiate (Cleric)",
        equipment=("calligrapher's supplies", "book (prayers)", "holy symbol", "parchment (10 sheets)", "robe", "8 gp"),
        traits=(Trait(name="Shelter of the Faithful", description="Free support and lodging at a temple of your faith."),),
    ),
    Background(
        name="criminal",
        skill_proficiencies=("deception", "stealth"),
        tool_proficiencies=("thieves' tools",),
        ability_scores=(Ability.DEX, Ability.CON, Ability.INT),
        feat="Alert",
        equipment=("2 daggers", "thieves' tools", "crowbar", "2 pouches", "traveler's clothes", "16 gp"),
        traits=(Trait(name="Criminal Contact", description="A reliable contact within the criminal underworld."),),
    ),
    Background(
        name="sage",
        skill_proficiencies=("arcana", "history"),
        tool_proficiencies=("calligrapher's supplies",),
        ability_scores=(Ability.CON, Ability.INT, Ability.WIS),
        feat="Magic Initiate (Wizard)",
        equipment=("quarterstaff", "calligrapher's supplies", "book (history)", "parchment (8 sheets)", "robe", "8 gp"),
        traits=(Trait(name="Researcher", description="You usually know where to obtain a piece of lore."),),
    ),
    Background(
        name="soldier",
        skill_proficiencies=("athletics", "intimidation"),
        tool_proficiencies=(Choice(choose=1, options=("dice set", "playing card set")),),
        ability_scores=(Ability.STR, Ability.DEX, Ability.CON),
        feat="Savage Attacker",
        equipment=("spear", "shortbow", "20 arrows", "gaming set", "healer's kit", "quiver", "traveler's clothes", "14 gp"),
        traits=(Trait(name="Military Rank", description="Soldiers loyal to your former organization recognize your authority."),),
    ),
)


# =============================================================================
# Spell Progression
# =============================================================================

_FULL_PREPARED = (4, 5, 6, 7, 9, 10, 11, 12, 14, 15, 16, 16, 17, 17, 18, 18, 19, 20, 21, 22)
_HALF_PREPARED = (2, 3, 4, 5, 6, 6, 7, 7, 9, 9, 10, 10, 11, 11, 12, 12, 14, 14, 15, 15)

SPELL_TABLES = {
    ClassName.BARD: build_progression(
        cantrips=NATIVE_CANTRIPS[ClassName.BARD], slots=FULL_CASTER_SLOTS, prepared=_FULL_PREPARED
    ),
    ClassName.CLERIC: build_progression(
        cantrips=NATIVE_CANTRIPS[ClassName.CLERIC], slots=FULL_CASTER_SLOTS, prepared=_FULL_PREPARED
    ),
    ClassName.DRUID: build_progression(
        cantrips=NATIVE_CANTRIPS[ClassName.DRUID], slots=FULL_CASTER_SLOTS, prepared=_FULL_PREPARED
    ),
    ClassName.PALADIN: build_progression(
        cantrips=NO_CANTRIPS, slots=HALF_CASTER_SLOTS, prepared=_HALF_PREPARED
    ),
    ClassName.RANGER: build_progression(
        cantrips=NO_CANTRIPS, slots=HALF_CASTER_SLOTS, prepared=_HALF_PREPARED
    ),
    ClassName.SORCERER: build_progression(
        cantrips=NATIVE_CANTRIPS[ClassName.SORCERER], slots=FULL_CASTER_SLOTS, prepared=_FULL_PREPARED
    ),
    ClassName.WARLOCK: build_progression(
        cantrips=NATIVE_CANTRIPS[ClassName.WARLOCK],
        slots=PACT_SLOTS,
        prepared=(2, 3, 4, 5, 6, 7, 8, 9, 10, 10, 11, 11, 12, 12, 13, 13, 14, 14, 15, 15),
        with_arcanum=True,
    ),
    ClassName.WIZARD: build_progression(cantrips=NATIVE_CANTRIPS[ClassName.WIZARD], slots=FULL_CASTER_SLOTS),
}


SRD52 = Ruleset(
    id=RulesetId.SRD52,
    description="Current rules: System Reference Document 5.2",
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


__all__ = ["SRD52"]
