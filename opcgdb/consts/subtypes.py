"""
Subtype catalog

Each row is (member name, canonical text, alias text or None).
The canonical text is what the card list prints and what OPCGDB
writes back out; the alias is an alternate spelling seen on some
editions that must resolve to the same subtype.
"""
from typing import Optional, Tuple

SUBTYPE_TABLE: Tuple[Tuple[str, str, Optional[str]], ...] = (
    ("ALABASTA", "Alabasta", None),
    ("ALVIDA_PIRATES", "Alvida Pirates", None),
    ("AMAZON_LILY", "Amazon Lily", None),
    ("ANIMAL", "Animal", None),
    ("ANIMAL_KINGDOM_PIRATES", "Animal Kingdom Pirates", None),
    ("ARLONG_PIRATES", "Arlong Pirates", None),
    ("ASUKA_ISLAND", "Asuka Island", None),
    ("BAROQUE_WORKS", "Baroque Works", None),
    ("BARTO_CLUB", "Barto Club", None),
    ("BEAUTIFUL_PIRATES", "Beautiful Pirates", None),
    ("BELLAMY_PIRATES", "Bellamy Pirates", None),
    ("BIG_MOM_PIRATES", "Big Mom Pirates", None),
    ("BIOLOGICAL_WEAPON", "Biological Weapon", None),
    ("BLACK_CAT_PIRATES", "Black Cat Pirates", None),
    ("BLACKBEARD_PIRATES", "Blackbeard Pirates", None),
    ("BLUEJAM_PIRATES", "Bluejam Pirates", None),
    ("BONNEY_PIRATES", "Bonney Pirates", None),
    ("BOWIN_ISLAND", "Bowin Island", None),
    ("BUGGY_PIRATES", "Buggy Pirates", None),
    ("BUGGYS_DELIVERY", "Buggy's Delivery", None),
    ("CP0", "CP0", None),
    ("CP6", "CP6", None),
    ("CP7", "CP7", None),
    ("CP9", "CP9", None),
    ("CARIBOU_PIRATES", "Caribou Pirates", None),
    ("CELESTIAL_DRAGONS", "Celestial Dragons", None),
    ("CROWN_ISLAND", "Crown Island", None),
    ("DONQUIXOTE_PIRATES", "Donquixote Pirates", None),
    ("DRAKE_PIRATES", "Drake Pirates", None),
    ("DRESSROSA", "Dressrosa", None),
    ("DRUM_KINGDOM", "Drum Kingdom", None),
    ("EAST_BLUE", "East Blue", None),
    ("EGGHEAD", "Egghead", None),
    ("ELDORAGGO_CREW", "Eldoraggo Crew", None),
    ("FILM", "FILM", None),
    ("FALLEN_MONK_PIRATES", "Fallen Monk Pirates", None),
    ("FIRETANK_PIRATES", "Firetank Pirates", None),
    ("FISH_MAN", "Fish-Man", None),
    ("FISH_MAN_ISLAND", "Fish-Man Island", None),
    ("FLYING_PIRATES", "Flying Pirates", None),
    ("FOOLSHOUT_ISLAND", "Foolshout Island", None),
    ("FORMER_ARLONG_PIRATES", "Former Arlong Pirates", None),
    ("FORMER_BAROQUE_WORKS", "Former Baroque Works", None),
    ("FORMER_NAVY", "Former Navy", None),
    ("FORMER_ROCKS_PIRATES", "Former Rocks Pirates", None),
    ("FORMER_ROGER_PIRATES", "Former Roger Pirates", None),
    ("FORMER_RUMBAR_PIRATES", "Former Rumbar Pirates", None),
    ("FORMER_WHITEBEARD_PIRATES", "Former Whitebeard Pirates", None),
    ("FOXY_PIRATES", "Foxy Pirates", None),
    ("FROST_MOON_VILLAGE", "Frost Moon Village", None),
    ("GERMA_66", "GERMA 66", None),
    ("GALLEY_LA_COMPANY", "Galley-La Company", None),
    ("GASPARDE_PIRATES", "Gasparde Pirates", None),
    ("GIANT", "Giant", None),
    ("GOA_KINGDOM", "Goa Kingdom", None),
    ("GOLDEN_LION_PIRATES", "Golden Lion Pirates", None),
    ("GRANTESORO", "Grantesoro", None),
    ("GYRO_PIRATES", "Gyro Pirates", None),
    ("HAPPOSUI_ARMY", "Happosui Army", None),
    ("HAWKINS_PIRATES", "Hawkins Pirates", None),
    ("HEART_PIRATES", "Heart Pirates", None),
    ("HOMIES", "Homies", None),
    ("IMPEL_DOWN", "Impel Down", None),
    ("JAILER_BEAST", "Jailer Beast", None),
    ("JELLYFISH_PIRATES", "Jellyfish Pirates", None),
    ("JOURNALIST", "Journalist", None),
    ("KID_PIRATES", "Kid Pirates", None),
    ("KINGDOM_OF_GERMA", "Kingdom of GERMA", None),
    ("KINGDOM_OF_PRODENCE", "Kingdom of Prodence", None),
    ("KOUZUKI_CLAN", "Kouzuki Clan", None),
    ("KRIEG_PIRATES", "Krieg Pirates", None),
    ("KUJA_PIRATES", "Kuja Pirates", None),
    ("KUROZUMI_CLAN", "Kurozumi Clan", None),
    ("LAND_OF_WANO", "Land of Wano", None),
    ("LONG_RING_LONG_LAND", "Long Ring Long Land", None),
    ("LULUCIA_KINGDOM", "Lulucia Kingdom", None),
    ("MARY_GEOISE", "Mary Geoise", None),
    ("MECHA_ISLAND", "Mecha Island", None),
    ("MERFOLK", "Merfolk", None),
    ("MINKS", "Minks", None),
    ("MONKEY_MOUNTAIN_ALLIANCE", "Monkey Mountain Alliance", None),
    ("MOUNTAIN_BANDITS", "Mountain Bandits", None),
    ("MUGGY_KINGDOM", "Muggy Kingdom", None),
    ("MUGIWARA_CHASE", "Mugiwara Chase", None),
    ("MUSIC", "Music", "音楽"),
    ("NAVY", "Navy", None),
    ("NEO_NAVY", "Neo Navy", None),
    ("NEW_FISH_MAN_PIRATES", "New Fish-Man Pirates", None),
    ("NEW_GIANT_PIRATES", "New Giant Pirates", None),
    ("ODYSSEY", "ODYSSEY", None),
    ("OMATSURI_ISLAND", "Omatsuri Island", None),
    ("ON_AIR_PIRATES", "On-Air Pirates", None),
    ("PLAGUE", "Plague", None),
    ("PUNK_HAZARD", "Punk Hazard", None),
    ("RED_HAIRED_PIRATES", "Red-Haired Pirates", None),
    ("REVOLUTIONARY_ARMY", "Revolutionary Army", None),
    ("RUMBAR_PIRATES", "Rumbar Pirates", None),
    ("SMILE", "SMILE", "Smile"),
    ("SCIENTIST", "Scientist", None),
    ("SHANDIAN_WARRIOR", "Shandian Warrior", None),
    ("SHIPBUILDING_TOWN", "Shipbuilding Town", None),
    ("SKY_ISLAND", "Sky Island", None),
    ("SNIPER_ISLAND", "Sniper Island", None),
    ("SPADE_PIRATES", "Spade Pirates", None),
    ("STRAW_HAT_CREW", "Straw Hat Crew", None),
    ("SUPERNOVAS", "Supernovas", None),
    ("THE_AKAZAYA_NINE", "The Akazaya Nine", None),
    ("THE_FLYING_FISH_RIDERS", "The Flying Fish Riders", None),
    ("THE_FOUR_EMPERORS", "The Four Emperors", None),
    ("THE_FRANKY_FAMILY", "The Franky Family", None),
    ("THE_HOUSE_OF_LAMBS", "The House of Lambs", None),
    ("THE_MOON", "The Moon", None),
    ("THE_PIRATES_FEST", "The Pirates Fest", None),
    ("THE_SEVEN_WARLORDS_OF_THE_SEA", "The Seven Warlords of the Sea", None),
    ("THE_SUN_PIRATES", "The Sun Pirates", None),
    ("THE_TONTATTAS", "The Tontattas", None),
    ("THE_VINSMOKE_FAMILY", "The Vinsmoke Family", None),
    ("THRILLER_BARK_PIRATES", "Thriller Bark Pirates", None),
    ("TRUMP_PIRATES", "Trump Pirates", None),
    ("VASSALS", "Vassals", None),
    ("WATER_SEVEN", "Water Seven", None),
    ("WEEVILS_MOTHER", "Weevil's Mother", None),
    ("WHITEBEARD_PIRATES", "Whitebeard Pirates", None),
    ("WHITEBEARD_PIRATES_ALLIES", "Whitebeard Pirates Allies", None),
    ("WHOLE_CAKE_ISLAND", "Whole Cake Island", None),
    ("WINDMILL_VILLAGE", "Windmill Village", None),
    ("WORLD_GOVERNMENT", "World Government", None),
    ("WORLD_PIRATES", "World Pirates", None),
    ("YONTA_MARIA_FLEET", "Yonta Maria Fleet", None),
)
