"""Static catalog of games profiles can list as favorites."""

from src.schemas.game import Game

DEFAULT_GAME_ICON = "/icons/games/default-game.svg"

GAME_CATALOG: tuple[Game, ...] = (
    # FPS / tactical shooters
    Game(slug="valorant", name="Valorant", icon="/icons/games/valorant.svg", category="FPS", platforms=("PC",)),
    Game(
        slug="counter-strike-2",
        name="Counter-Strike 2",
        icon="/icons/games/cs2.svg",
        category="FPS",
        platforms=("PC",),
    ),
    Game(
        slug="overwatch-2",
        name="Overwatch 2",
        icon="/icons/games/overwatch.svg",
        category="FPS",
        platforms=("PC", "Console"),
    ),
    Game(
        slug="halo-infinite",
        name="Halo Infinite",
        icon="/icons/games/halo.svg",
        category="FPS",
        platforms=("PC", "Xbox"),
    ),
    # Battle royale
    Game(
        slug="apex-legends",
        name="Apex Legends",
        icon="/icons/games/apex.svg",
        category="Battle Royale",
        platforms=("PC", "Console"),
    ),
    Game(
        slug="call-of-duty-warzone",
        name="Call of Duty: Warzone",
        icon="/icons/games/cod-warzone.svg",
        category="Battle Royale",
        platforms=("PC", "Console"),
    ),
    Game(
        slug="fortnite",
        name="Fortnite",
        icon="/icons/games/fortnite.svg",
        category="Battle Royale",
        platforms=("PC", "Console", "Mobile"),
    ),
    Game(
        slug="pubg",
        name="PUBG",
        icon="/icons/games/pubg.svg",
        category="Battle Royale",
        platforms=("PC", "Console", "Mobile"),
    ),
    # MOBA
    Game(
        slug="league-of-legends",
        name="League of Legends",
        icon="/icons/games/lol.svg",
        category="MOBA",
        platforms=("PC",),
    ),
    Game(slug="dota-2", name="Dota 2", icon="/icons/games/dota2.svg", category="MOBA", platforms=("PC",)),
    Game(
        slug="brawl-stars",
        name="Brawl Stars",
        icon="/icons/games/brawl-stars.svg",
        category="MOBA",
        platforms=("Mobile",),
    ),
    # MMORPG / RPG
    Game(
        slug="world-of-warcraft",
        name="World of Warcraft",
        icon="/icons/games/wow.svg",
        category="MMORPG",
        platforms=("PC",),
    ),
    Game(
        slug="final-fantasy-xiv",
        name="Final Fantasy XIV",
        icon="/icons/games/ffxiv.svg",
        category="MMORPG",
        platforms=("PC", "Console"),
    ),
    Game(slug="lost-ark", name="Lost Ark", icon="/icons/games/lost-ark.svg", category="MMORPG", platforms=("PC",)),
    Game(
        slug="genshin-impact",
        name="Genshin Impact",
        icon="/icons/games/genshin.svg",
        category="RPG",
        platforms=("PC", "Console", "Mobile"),
    ),
    Game(
        slug="baldurs-gate-3",
        name="Baldur's Gate 3",
        icon="/icons/games/bg3.svg",
        category="RPG",
        platforms=("PC", "Console"),
    ),
    Game(
        slug="hogwarts-legacy",
        name="Hogwarts Legacy",
        icon="/icons/games/hogwarts.svg",
        category="RPG",
        platforms=("PC", "Console"),
    ),
    # Sandbox / survival
    Game(
        slug="minecraft",
        name="Minecraft",
        icon="/icons/games/minecraft.svg",
        category="Sandbox",
        platforms=("PC", "Console", "Mobile"),
    ),
    Game(slug="rust", name="Rust", icon="/icons/games/rust.svg", category="Survival", platforms=("PC",)),
    Game(slug="valheim", name="Valheim", icon="/icons/games/valheim.svg", category="Survival", platforms=("PC",)),
    Game(slug="palworld", name="Palworld", icon="/icons/games/palworld.svg", category="Survival", platforms=("PC",)),
    # Sports / racing
    Game(
        slug="rocket-league",
        name="Rocket League",
        icon="/icons/games/rocket-league.svg",
        category="Sports",
        platforms=("PC", "Console"),
    ),
    Game(
        slug="gran-turismo-7",
        name="Gran Turismo 7",
        icon="/icons/games/gt7.svg",
        category="Racing",
        platforms=("Console",),
    ),
    # Strategy
    Game(slug="starcraft-2", name="StarCraft 2", icon="/icons/games/sc2.svg", category="RTS", platforms=("PC",)),
    Game(
        slug="age-of-empires-4",
        name="Age of Empires IV",
        icon="/icons/games/aoe4.svg",
        category="RTS",
        platforms=("PC",),
    ),
    Game(
        slug="teamfight-tactics",
        name="Teamfight Tactics",
        icon="/icons/games/tft.svg",
        category="Auto Battler",
        platforms=("PC", "Mobile"),
    ),
    Game(
        slug="hearthstone",
        name="Hearthstone",
        icon="/icons/games/hearthstone.svg",
        category="Card Game",
        platforms=("PC", "Mobile"),
    ),
    Game(
        slug="clash-royale",
        name="Clash Royale",
        icon="/icons/games/clash-royale.svg",
        category="Strategy",
        platforms=("Mobile",),
    ),
    # Simulation / party
    Game(
        slug="cities-skylines",
        name="Cities: Skylines",
        icon="/icons/games/cities-skylines.svg",
        category="Simulation",
        platforms=("PC", "Console"),
    ),
    Game(
        slug="sims-4",
        name="The Sims 4",
        icon="/icons/games/sims4.svg",
        category="Simulation",
        platforms=("PC", "Console"),
    ),
    Game(
        slug="stardew-valley",
        name="Stardew Valley",
        icon="/icons/games/stardew.svg",
        category="Simulation",
        platforms=("PC", "Console", "Mobile"),
    ),
    Game(
        slug="among-us",
        name="Among Us",
        icon="/icons/games/among-us.svg",
        category="Party",
        platforms=("PC", "Console", "Mobile"),
    ),
    Game(
        slug="fall-guys",
        name="Fall Guys",
        icon="/icons/games/fall-guys.svg",
        category="Party",
        platforms=("PC", "Console"),
    ),
    # Fighting / horror / action
    Game(
        slug="street-fighter-6",
        name="Street Fighter 6",
        icon="/icons/games/sf6.svg",
        category="Fighting",
        platforms=("PC", "Console"),
    ),
    Game(
        slug="tekken-8",
        name="Tekken 8",
        icon="/icons/games/tekken8.svg",
        category="Fighting",
        platforms=("PC", "Console"),
    ),
    Game(
        slug="dead-by-daylight",
        name="Dead by Daylight",
        icon="/icons/games/dbd.svg",
        category="Horror",
        platforms=("PC", "Console"),
    ),
    Game(
        slug="phasmophobia",
        name="Phasmophobia",
        icon="/icons/games/phasmophobia.svg",
        category="Horror",
        platforms=("PC",),
    ),
    Game(
        slug="hollow-knight",
        name="Hollow Knight",
        icon="/icons/games/hollow-knight.svg",
        category="Metroidvania",
        platforms=("PC", "Console"),
    ),
    Game(
        slug="god-of-war",
        name="God of War",
        icon="/icons/games/gow.svg",
        category="Action",
        platforms=("PC", "PlayStation"),
    ),
    Game(
        slug="spider-man",
        name="Marvel's Spider-Man",
        icon="/icons/games/spiderman.svg",
        category="Action",
        platforms=("PC", "PlayStation"),
    ),
)


def get_game_by_slug(slug: str, catalog: tuple[Game, ...] = GAME_CATALOG) -> Game | None:
    """Find a catalog game by slug."""
    for game in catalog:
        if game.slug == slug:
            return game
    return None


def describe_game(slug: str) -> Game:
    """Catalog details for a slug, or a title-cased placeholder.

    Profiles may list games the catalog does not know; they are shown with
    a name built from the slug and the default icon.
    """
    game = get_game_by_slug(slug)
    if game is not None:
        return game
    name = " ".join(word.capitalize() for word in slug.split("-"))
    return Game(slug=slug, name=name, icon=DEFAULT_GAME_ICON)


def search_games(query: str, catalog: tuple[Game, ...] = GAME_CATALOG) -> list[Game]:
    """Catalog games whose name, slug or category contains the query."""
    query = query.strip().lower()
    return [
        game
        for game in catalog
        if query in game.name.lower() or query in game.slug or query in (game.category or "").lower()
    ]
