"""
Known crystal frequencies

There is a finite list of manufactured crystals. This table documents the
speeds crystals were actually sold in, so that clock values copied into
device definitions can be checked against real parts. Frequency counters
read a little off and parts have a tolerance: add a value here only when it
is printed on a real part, never from a direct measurement.

Some crystals have fractional nominal values (the NTSC color subcarrier is
315/88 MHz = 3.579545454... MHz). For readability the closest integer is
listed; a measured or computed clock should be rounded to the listed value.

Very high clocks (above ~100 MHz) are usually produced by a multiplier IC
from a lower frequency crystal; validate the crystal, not the product.

The table MUST stay in ascending order with no duplicates, it is
binary-searched.
"""

import numpy as np

_KNOWN_XTALS = (
    # Frequency (Hz)  Notes
    32_768,      # Used to drive RTC chips
    38_400,      # Resonator
    384_000,     # Resonator - Commonly used for driving OKI MSM5205
    400_000,     # Resonator - OKI MSM5205 on Great Swordman h/w
    430_000,     # Resonator
    455_000,     # Resonator - OKI MSM5205 on Gladiator h/w
    512_000,     # Resonator - Toshiba TC8830F
    600_000,
    640_000,     # Resonator - NEC UPD7759, Texas Instruments Speech Chips @ 8khz
    960_000,     # Resonator - Xerox Notetaker Keyboard UART
    1_000_000,   # Used to drive OKI M6295 chips
    1_008_000,   # Acorn Microcomputer (System 1)
    1_056_000,   # Resonator - OKI M6295 on Trio The Punch h/w
    1_294_400,   # BBN BitGraph PSG
    1_689_600,   # Diablo 1355WP Printer
    1_750_000,   # RCA CDP1861
    1_797_100,   # SWTPC 6800 (with MIKBUG)
    1_843_200,   # Bondwell 12/14
    2_000_000,
    2_012_160,   # Cidelsa Draco sound board
    2_097_152,   # Icatel 1995 - Brazilian public payphone
    2_457_600,   # Atari ST MFP
    2_500_000,   # Janken Man units
    2_950_000,   # Playmatic MPU-C, MPU-III & Sound-3
    3_000_000,   # Probably only used to drive 68705 or similar MCUs on 80's Taito PCBs
    3_072_000,   # INS 8520 input clock rate
    3_120_000,   # SP0250 clock on Gottlieb games
    3_521_280,   # RCA COSMAC VIP
    3_570_000,   # Telmac TMC-600
    3_578_640,   # Atari Portfolio PCD3311T
    3_579_545,   # NTSC color subcarrier, extremely common, used on 100's of PCBs (Keytronic custom part #48-300-010 is equivalent)
    3_686_400,   # Baud rate clock for MC68681 and similar UARTs
    3_840_000,   # Fairlight CMI Alphanumeric Keyboard
    3_900_000,   # Resonator - Used on some Fidelity boards
    4_000_000,
    4_028_000,   # Sony SMC-777
    4_032_000,   # GRiD Compass modem board
    4_096_000,   # Used to drive OKI M9810 chips
    4_194_304,   # Used to drive MC146818 / Nintendo Game Boy
    4_224_000,   # Used to drive OKI M6295 chips, usually with /4 divider
    4_410_000,   # Pioneer PR-8210 ldplayer
    4_433_610,   # Cidelsa Draco
    4_433_619,   # PAL color subcarrier (technically 4.43361875mhz)
    4_608_000,   # Luxor ABC-77 keyboard (Keytronic custom part #48-300-107 is equivalent)
    4_915_200,
    5_000_000,   # Mutant Night
    5_068_800,   # Usually used as MC2661 or COM8116 baud rate clock
    5_185_000,   # Intel INTELLEC® 4
    5_460_000,   # ec1840 and ec1841 keyboard
    5_529_600,   # Kontron PSI98 keyboard
    5_626_000,   # RCA CDP1869 PAL dot clock
    5_670_000,   # RCA CDP1869 NTSC dot clock
    5_714_300,   # Cidelsa Destroyer, TeleVideo serial keyboards
    5_911_000,   # Philips Videopac Plus G7400
    5_990_400,   # Luxor ABC 800 keyboard (Keytronic custom part #48-300-008 is equivalent)
    6_000_000,   # American Poker II, Taito SJ System
    6_144_000,   # Used on Alpha Denshi early 80's games sound board, Casio FP-200 and Namco Universal System 16
    6_400_000,   # Textel Compact
    6_500_000,   # Jupiter Ace
    6_880_000,   # Barcrest MPU4
    6_900_000,   # BBN BitGraph CPU
    7_000_000,   # Jaleco Mega System PCBs
    7_159_090,   # Blood Bros (2x NTSC subcarrier)
    7_372_800,
    7_864_300,   # Used on InterFlip games as video clock
    7_987_000,   # PC9801-86 YM2608 clock
    8_000_000,   # Extremely common, used on 100's of PCBs
    8_200_000,   # Universal Mr. Do - Model 8021 PCB
    8_388_000,   # Nintendo Game Boy Color
    8_448_000,   # Banpresto's Note Chance - Used to drive OKI M6295 chips, usually with /8 divider
    8_467_200,   # Subsino's Ying Hua Lian
    8_664_000,   # Touchmaster
    8_700_000,   # Tandberg TDV 2324
    8_867_236,   # RCA CDP1869 PAL color clock (~2x PAL subcarrier)
    8_867_238,   # ETI-660 (~2x PAL subcarrier)
    8_945_000,   # Hit Me
    9_216_000,   # Conitec PROF-180X
    9_828_000,   # Universal PCBs
    9_830_400,   # Epson PX-8
    9_832_000,   # Robotron A7150
    9_877_680,   # Microterm 420
    9_987_000,   # Crazy Balloon
    10_000_000,
    10_137_600,  # Wyse WY-100
    10_245_000,  # PES Speech box
    10_380_000,  # Fairlight Q219 Lightpen/Graphics Card
    10_500_000,  # Agat-7
    10_595_000,  # Mad Alien
    10_644_500,  # TRS-80 Model I
    10_687_500,  # BBC Bridge Companion
    10_694_250,  # Xerox 820
    10_717_200,  # Eltec EurocomII
    10_730_000,  # Ruleta RE-900 VDP Clock
    10_733_000,  # The Fairyland Story
    10_738_635,  # TMS9918 family (3x NTSC subcarrier)
    10_816_000,  # Universal 1979-1980 (Cosmic Alien, etc)
    10_920_000,  # ADDS Viewpoint 60, Viewpoint A2
    11_000_000,  # Mario I8039 sound
    11_059_200,  # Used with MCS-51 to generate common baud rates
    11_200_000,  # New York, New York
    11_289_000,  # Vanguard
    11_400_000,  # HP 9845
    11_668_800,  # Gameplan pixel clock
    11_800_000,  # IBM PC Music Feature Card
    11_980_800,  # Luxor ABC 80
    12_000_000,  # Extremely common, used on 100's of PCBs
    12_057_600,  # Poly 1 (38400 * 314)
    12_096_000,  # Some early 80's Atari games
    12_288_000,  # Sega Model 3 digital audio board
    12_324_000,  # Otrona Attache
    12_432_000,  # Kaneko Fly Boy/Fast Freddie Hardware
    12_472_500,  # Bonanza's Mini Boy 7
    12_480_000,  # TRS-80 Model II
    12_500_000,  # Red Alert audio board
    12_672_000,  # TRS-80 Model 4 80*24 video
    12_800_000,  # Cave CV1000
    12_854_400,  # Alphatronic P3
    12_936_000,  # CDC 721
    12_979_200,  # Exidy 440
    13_300_000,  # BMC bowling
    13_330_560,  # Taito L
    13_333_000,  # Ojanko High School
    13_400_000,  # TNK3, Ikari Warriors h/w
    13_478_400,  # TeleVideo 970 80-column display clock
    13_495_200,  # Used on Shadow Force pcb and maybe other Technos pcbs?
    13_516_800,  # Kontron KDT6
    13_608_000,  # TeleVideo 910 & 925
    13_824_000,  # Robotron PC-1715 display circuit
    14_000_000,
    14_112_000,  # Timex/Sinclair TS2068
    14_192_640,  # Central Data 2650
    14_218_000,  # Dragon
    14_300_000,  # Agat-7
    14_314_000,  # Taito TTL Board
    14_318_181,  # Extremely common, used on 100's of PCBs (4x NTSC subcarrier)
    14_705_882,  # Aleck64
    14_745_600,  # Namco System 12 & System Super 22/23 for JVS
    14_784_000,  # Zenith Z-29
    14_916_000,  # ADDS Viewpoint 122
    14_976_000,  # CIT-101 80-column display clock
    15_000_000,  # Sinclair QL, Amusco Poker
    15_148_800,  # Zentec 9002/9003
    15_288_000,  # DEC VT220 80-column display clock
    15_300_720,  # Microterm 420
    15_360_000,  # Visual 1050
    15_400_000,  # DVK KSM
    15_468_480,  # Bank Panic h/w, Sega G80
    15_582_000,  # Zentec Zephyr
    15_700_000,  # Motogonki
    15_897_600,  # IAI Swyft
    15_920_000,  # HP Integral PC
    15_974_400,  # Osborne 1 (9600 * 52 * 32)
    16_000_000,  # Extremely common, used on 100's of PCBs
    16_097_280,  # DEC VT240 (1024 * 262 * 60)
    16_128_000,  # Fujitsu FM-7
    16_384_000,
    16_400_000,  # MS 6102
    16_572_000,  # Micro-Term ACT-5A
    16_588_800,  # SM 7238
    16_669_800,  # Qume QVT-102
    16_670_000,
    16_777_216,  # Nintendo Game Boy Advance
    16_934_400,  # Usually used to drive 90's Yamaha OPL/FM chips (44100 * 384)
    17_064_000,  # Memorex 1377
    17_360_000,  # OMTI Series 10 SCSI controller
    17_550_000,  # HP 264x display clock (50 Hz configuration)
    17_600_000,  # LSI Octopus
    17_734_470,  # (~4x PAL subcarrier)
    17_734_472,  # actually ~4x PAL subcarrier
    17_971_200,  # Compucolor II, Hazeltine Esprit III
    18_000_000,  # S.A.R, Ikari Warriors 3
    18_432_000,  # Extremely common, used on 100's of PCBs (48000 * 384)
    18_480_000,  # Wyse WY-100 video
    18_575_000,  # Visual 102, Visual 220
    18_720_000,  # Nokia MikroMikko 1
    18_869_600,  # Memorex 2178
    19_339_600,  # TeleVideo TVI-955 80-column display clock
    19_600_000,  # Universal Mr. Do - Model 8021 PCB
    19_602_000,  # Ampex 210+ 80-column display clock
    19_660_800,  # Euro League (bootleg), labeled as "UKI 19.6608 20PF"
    19_661_400,  # Wyse WY-30
    19_923_000,  # Cinematronics vectors
    19_968_000,  # Used mostly by some Taito games
    20_000_000,
    20_160_000,  # Nintendo 8080
    20_275_200,  # TRS-80 Model III
    20_625_000,  # SM 7238
    20_790_000,  # Blockade-hardware Gremlin games
    21_000_000,  # Lock-On pixel clock
    21_052_600,  # NEC PC-98xx pixel clock
    21_060_000,  # HP 264x display clock (60 Hz configuration)
    21_254_400,  # TeleVideo 970 132-column display clock
    21_281_370,  # Radica Tetris (PAL)
    21_300_000,
    21_477_272,  # BMC bowling, some Data East 90's games, Vtech Socrates; (6x NTSC subcarrier)
    22_000_000,
    22_032_000,  # Intellec Series II I/O controller
    22_096_000,  # ADDS Viewpoint 122
    22_118_400,  # Amusco Poker
    22_321_000,  # Apple LaserWriter II NT
    22_464_000,  # CIT-101 132-column display clock
    22_656_000,  # Super Pinball Action (~1440x NTSC line rate)
    22_896_000,  # DEC VT220 132-column display clock
    23_814_000,  # TeleVideo TVI-912, 920 & 950
    23_961_600,  # Osborne 4 (Vixen)
    24_000_000,  # Mario, 80's Data East games, 80's Konami games
    24_073_400,  # DEC Rainbow 100
    24_576_000,  # Pole Position h/w, Model 3 CPU board
    24_883_200,  # DEC VT100
    25_000_000,  # Namco System 22, Taito GNET, Dogyuun h/w
    25_174_800,  # Sega System 16A/16B (1600x NTSC line rate)
    25_200_000,  # Tektronix 4404 video clock
    25_398_360,  # Tandberg TDV 2324
    25_400_000,  # PC9801-86 PCM base clock
    25_447_000,  # Namco EVA3A (Funcube2)
    25_590_906,  # Atari Jaguar NTSC
    25_593_900,  # Atari Jaguar PAL
    25_771_500,  # HP-2622A
    25_920_000,  # ADDS Viewpoint 60
    26_000_000,  # Gaelco PCBs
    26_366_000,  # DEC VT320
    26_580_000,  # Wyse WY-60 80-column display clock
    26_601_712,  # Astro Corp.'s Show Hand, PAL Vtech/Yeno Socrates (6x PAL subcarrier)
    26_666_000,  # Imagetek I4100/I4220/I4300
    26_666_666,  # Irem M92 but most use 27MHz
    26_686_000,  # Typically used on 90's Taito PCBs to drive the custom chips
    26_989_200,  # TeleVideo 965
    27_000_000,  # Some Banpresto games macrossp, Irem M92 and 90's Toaplan games
    27_164_000,  # Typically used on 90's Taito PCBs to drive the custom chips
    27_210_900,  # LA Girl
    27_562_000,  # Visual 220
    28_000_000,
    28_322_000,  # Saitek RISC 2500, Mephisto Montreux
    28_375_160,  # Amiga PAL systems
    28_475_000,  # CoCo 3 PAL
    28_480_000,  # Chromatics CGC-7900
    28_636_363,  # Later Leland games and Atari GT, Amiga NTSC, Raiden2 h/w (8x NTSC subcarrier)
    28_640_000,  # Fukki FG-1c AI AM-2 PCB
    28_700_000,
    29_376_000,  # Qume QVT-103
    29_491_200,  # Xerox Alto-II system clock (tagged 29.4MHz in the schematics)
    30_000_000,  # Impera Magic Card
    30_476_100,  # Taito JC
    30_800_000,  # 15IE-00-013
    31_279_500,  # Wyse WY-30+
    31_684_000,  # TeleVideo TVI-955 132-column display clock
    31_948_800,  # NEC PC-88xx, PC-98xx
    32_000_000,
    32_147_000,  # Ampex 210+ 132-column display clock
    32_220_000,  # Typically used on 90's Data East PCBs (close to 9x NTSC subcarrier which is 32.215905Mhz
    32_317_400,  # DEC VT330, VT340
    32_530_400,  # Seta 2
    33_000_000,  # Sega Model 3 video board
    33_264_000,  # Hazeltine 1500 terminal
    33_333_000,  # Sega Model 3 CPU board, Vegas
    33_833_000,
    33_868_800,  # Usually used to drive 90's Yamaha OPL/FM chips with /2 divider
    34_000_000,  # Gaelco PCBs
    34_291_712,  # Fairlight CMI master card
    34_846_000,  # Visual 550
    35_904_000,  # Used on HP98543 graphics board
    36_000_000,  # Sega Model 1 video board
    37_980_000,  # Falco 5220
    38_769_220,  # Namco System 21 video board
    38_863_630,  # Sharp X68000 15.98kHz video
    39_321_600,  # Sun 2/120
    39_710_000,  # Wyse WY-60 132-column display clock
    40_000_000,
    40_210_000,  # Fairlight CMI IIx
    42_000_000,  # BMC A-00211 - Popo Bear
    42_105_200,  # NEC PC-88xx
    42_954_545,  # CPS3 (12x NTSC subcarrier)
    43_320_000,  # DEC VT420
    44_100_000,  # Subsino's Bishou Jan
    44_452_800,  # TeleVideo 965
    45_000_000,  # Eolith with Hyperstone CPUs
    45_158_000,  # Sega Model 2A video board, Model 3 CPU board
    45_619_200,  # DEC VK100
    45_830_400,  # Microterm 5510
    46_615_120,  # Soundblaster 16 PCM base clock
    47_736_000,  # Visual 100
    48_000_000,  # Williams/Midway Y/Z-unit system / SSV board
    48_384_000,  # Namco NB-1
    48_556_800,  # Wyse WY-85
    48_654_000,  # Qume QVT-201
    48_660_000,  # Zaxxon
    49_152_000,  # Used on some Namco PCBs, Baraduke h/w, System 21, Super System 22
    49_423_500,  # Wyse WY-185
    50_000_000,  # Williams/Midway T/W/V-unit system
    50_113_000,  # Namco NA-1 (14x NTSC subcarrier)
    50_349_000,  # Sega System 18 (~3200x NTSC line rate)
    51_200_000,  # Namco Super System 22 video clock
    52_000_000,  # Cojag
    52_832_000,  # Wang PC TIG video controller
    53_203_400,  # Master System, Mega Drive PAL (~12x PAL subcarrier)
    53_693_175,  # PSX-based h/w, Sony ZN1-2-based (15x NTSC subcarrier)
    54_000_000,  # Taito JC
    55_000_000,  # Eolith Vega
    57_272_727,  # Psikyo SH2 with /2 divider (16x NTSC subcarrier)
    58_000_000,  # Magic Reel (Play System)
    59_292_000,  # Data General D461
    60_000_000,  # ARM610
    61_440_000,  # Donkey Kong
    64_000_000,  # BattleToads
    66_666_700,  # Later Midway games
    67_737_600,  # PSX-based h/w, Sony ZN1-2-based
    68_850_000,  # Wyse WY-50
    69_551_990,  # Sharp X68000 31.5kHz video
    72_000_000,  # Aristocrat MKV
    72_576_000,  # Centipede, Millipede, Missile Command, Let's Go Bowling "Multipede"
    73_728_000,  # Ms. Pac-Man/Galaga 20th Anniversary
    80_000_000,  # ARM710
    87_183_360,  # AT&T 630 MTG
    100_000_000, # PSX-based Namco System 12, Vegas, Sony ZN1-2-based
    101_491_200, # PSX-based Namco System 10
    200_000_000, # Base SH4 CPU (Naomi, Hikaru etc.)
)

KNOWN_XTALS = np.array(_KNOWN_XTALS, dtype=np.float64)
KNOWN_XTALS.flags.writeable = False


def table_range():
    """Smallest and largest known crystal, in Hz"""
    return float(KNOWN_XTALS[0]), float(KNOWN_XTALS[-1])


def xtals_between(min_freq: float = 0.0, max_freq: float = float("inf")) -> np.ndarray:
    """Known crystals with min_freq <= f <= max_freq"""
    lo = np.searchsorted(KNOWN_XTALS, min_freq, side="left")
    hi = np.searchsorted(KNOWN_XTALS, max_freq, side="right")
    return KNOWN_XTALS[lo:hi]
