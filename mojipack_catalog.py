#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
MojiPack Emoji Catalog
======================

The shipped, versioned emoji catalog. Codes are assigned in line order:
the first 2048 sequences become symbols 0..2047; later lines are spare.

Format follows Unicode's emoji-sequences.txt:

    code_point(s) ; type_field ; description

where code_point(s) is either a space-separated list of hex scalars (one
sequence) or a START..END hex range (one single-scalar sequence per value).

Changing anything that moves or alters one of the first 2048 sequences
breaks every previously encoded string; bump CATALOG_VERSION when doing so.
"""

CATALOG_VERSION = "mojipack-emoji-1"

CATALOG_SOURCE = """\
# mojipack emoji catalog
# Version: mojipack-emoji-1
#
# Lone skin-tone modifiers (1F3FB..1F3FF) and lone regional indicators
# are left out: they merge with their neighbours when concatenated.

# Emoji_Keycap_Sequence
0023 FE0F 20E3 ; Emoji_Keycap_Sequence ; keycap
002A FE0F 20E3 ; Emoji_Keycap_Sequence ; keycap
0030 FE0F 20E3 ; Emoji_Keycap_Sequence ; keycap
0031 FE0F 20E3 ; Emoji_Keycap_Sequence ; keycap
0032 FE0F 20E3 ; Emoji_Keycap_Sequence ; keycap
0033 FE0F 20E3 ; Emoji_Keycap_Sequence ; keycap
0034 FE0F 20E3 ; Emoji_Keycap_Sequence ; keycap
0035 FE0F 20E3 ; Emoji_Keycap_Sequence ; keycap
0036 FE0F 20E3 ; Emoji_Keycap_Sequence ; keycap
0037 FE0F 20E3 ; Emoji_Keycap_Sequence ; keycap
0038 FE0F 20E3 ; Emoji_Keycap_Sequence ; keycap
0039 FE0F 20E3 ; Emoji_Keycap_Sequence ; keycap

# RGI_Emoji_Flag_Sequence
1F1E6 1F1E8 ; RGI_Emoji_Flag_Sequence ; flag: AC
1F1E6 1F1E9 ; RGI_Emoji_Flag_Sequence ; flag: AD
1F1E6 1F1EA ; RGI_Emoji_Flag_Sequence ; flag: AE
1F1E6 1F1EB ; RGI_Emoji_Flag_Sequence ; flag: AF
1F1E6 1F1EC ; RGI_Emoji_Flag_Sequence ; flag: AG
1F1E6 1F1EE ; RGI_Emoji_Flag_Sequence ; flag: AI
1F1E6 1F1F1 ; RGI_Emoji_Flag_Sequence ; flag: AL
1F1E6 1F1F2 ; RGI_Emoji_Flag_Sequence ; flag: AM
1F1E6 1F1F4 ; RGI_Emoji_Flag_Sequence ; flag: AO
1F1E6 1F1F6 ; RGI_Emoji_Flag_Sequence ; flag: AQ
1F1E6 1F1F7 ; RGI_Emoji_Flag_Sequence ; flag: AR
1F1E6 1F1F8 ; RGI_Emoji_Flag_Sequence ; flag: AS
1F1E6 1F1F9 ; RGI_Emoji_Flag_Sequence ; flag: AT
1F1E6 1F1FA ; RGI_Emoji_Flag_Sequence ; flag: AU
1F1E6 1F1FC ; RGI_Emoji_Flag_Sequence ; flag: AW
1F1E6 1F1FD ; RGI_Emoji_Flag_Sequence ; flag: AX
1F1E6 1F1FF ; RGI_Emoji_Flag_Sequence ; flag: AZ
1F1E7 1F1E6 ; RGI_Emoji_Flag_Sequence ; flag: BA
1F1E7 1F1E7 ; RGI_Emoji_Flag_Sequence ; flag: BB
1F1E7 1F1E9 ; RGI_Emoji_Flag_Sequence ; flag: BD
1F1E7 1F1EA ; RGI_Emoji_Flag_Sequence ; flag: BE
1F1E7 1F1EB ; RGI_Emoji_Flag_Sequence ; flag: BF
1F1E7 1F1EC ; RGI_Emoji_Flag_Sequence ; flag: BG
1F1E7 1F1ED ; RGI_Emoji_Flag_Sequence ; flag: BH
1F1E7 1F1EE ; RGI_Emoji_Flag_Sequence ; flag: BI
1F1E7 1F1EF ; RGI_Emoji_Flag_Sequence ; flag: BJ
1F1E7 1F1F1 ; RGI_Emoji_Flag_Sequence ; flag: BL
1F1E7 1F1F2 ; RGI_Emoji_Flag_Sequence ; flag: BM
1F1E7 1F1F3 ; RGI_Emoji_Flag_Sequence ; flag: BN
1F1E7 1F1F4 ; RGI_Emoji_Flag_Sequence ; flag: BO
1F1E7 1F1F6 ; RGI_Emoji_Flag_Sequence ; flag: BQ
1F1E7 1F1F7 ; RGI_Emoji_Flag_Sequence ; flag: BR
1F1E7 1F1F8 ; RGI_Emoji_Flag_Sequence ; flag: BS
1F1E7 1F1F9 ; RGI_Emoji_Flag_Sequence ; flag: BT
1F1E7 1F1FB ; RGI_Emoji_Flag_Sequence ; flag: BV
1F1E7 1F1FC ; RGI_Emoji_Flag_Sequence ; flag: BW
1F1E7 1F1FE ; RGI_Emoji_Flag_Sequence ; flag: BY
1F1E7 1F1FF ; RGI_Emoji_Flag_Sequence ; flag: BZ
1F1E8 1F1E6 ; RGI_Emoji_Flag_Sequence ; flag: CA
1F1E8 1F1E8 ; RGI_Emoji_Flag_Sequence ; flag: CC
1F1E8 1F1E9 ; RGI_Emoji_Flag_Sequence ; flag: CD
1F1E8 1F1EB ; RGI_Emoji_Flag_Sequence ; flag: CF
1F1E8 1F1EC ; RGI_Emoji_Flag_Sequence ; flag: CG
1F1E8 1F1ED ; RGI_Emoji_Flag_Sequence ; flag: CH
1F1E8 1F1EE ; RGI_Emoji_Flag_Sequence ; flag: CI
1F1E8 1F1F0 ; RGI_Emoji_Flag_Sequence ; flag: CK
1F1E8 1F1F1 ; RGI_Emoji_Flag_Sequence ; flag: CL
1F1E8 1F1F2 ; RGI_Emoji_Flag_Sequence ; flag: CM
1F1E8 1F1F3 ; RGI_Emoji_Flag_Sequence ; flag: CN
1F1E8 1F1F4 ; RGI_Emoji_Flag_Sequence ; flag: CO
1F1E8 1F1F5 ; RGI_Emoji_Flag_Sequence ; flag: CP
1F1E8 1F1F7 ; RGI_Emoji_Flag_Sequence ; flag: CR
1F1E8 1F1FA ; RGI_Emoji_Flag_Sequence ; flag: CU
1F1E8 1F1FB ; RGI_Emoji_Flag_Sequence ; flag: CV
1F1E8 1F1FC ; RGI_Emoji_Flag_Sequence ; flag: CW
1F1E8 1F1FD ; RGI_Emoji_Flag_Sequence ; flag: CX
1F1E8 1F1FE ; RGI_Emoji_Flag_Sequence ; flag: CY
1F1E8 1F1FF ; RGI_Emoji_Flag_Sequence ; flag: CZ
1F1E9 1F1EA ; RGI_Emoji_Flag_Sequence ; flag: DE
1F1E9 1F1EC ; RGI_Emoji_Flag_Sequence ; flag: DG
1F1E9 1F1EF ; RGI_Emoji_Flag_Sequence ; flag: DJ
1F1E9 1F1F0 ; RGI_Emoji_Flag_Sequence ; flag: DK
1F1E9 1F1F2 ; RGI_Emoji_Flag_Sequence ; flag: DM
1F1E9 1F1F4 ; RGI_Emoji_Flag_Sequence ; flag: DO
1F1E9 1F1FF ; RGI_Emoji_Flag_Sequence ; flag: DZ
1F1EA 1F1E6 ; RGI_Emoji_Flag_Sequence ; flag: EA
1F1EA 1F1E8 ; RGI_Emoji_Flag_Sequence ; flag: EC
1F1EA 1F1EA ; RGI_Emoji_Flag_Sequence ; flag: EE
1F1EA 1F1EC ; RGI_Emoji_Flag_Sequence ; flag: EG
1F1EA 1F1ED ; RGI_Emoji_Flag_Sequence ; flag: EH
1F1EA 1F1F7 ; RGI_Emoji_Flag_Sequence ; flag: ER
1F1EA 1F1F8 ; RGI_Emoji_Flag_Sequence ; flag: ES
1F1EA 1F1F9 ; RGI_Emoji_Flag_Sequence ; flag: ET
1F1EA 1F1FA ; RGI_Emoji_Flag_Sequence ; flag: EU
1F1EB 1F1EE ; RGI_Emoji_Flag_Sequence ; flag: FI
1F1EB 1F1EF ; RGI_Emoji_Flag_Sequence ; flag: FJ
1F1EB 1F1F0 ; RGI_Emoji_Flag_Sequence ; flag: FK
1F1EB 1F1F2 ; RGI_Emoji_Flag_Sequence ; flag: FM
1F1EB 1F1F4 ; RGI_Emoji_Flag_Sequence ; flag: FO
1F1EB 1F1F7 ; RGI_Emoji_Flag_Sequence ; flag: FR
1F1EC 1F1E6 ; RGI_Emoji_Flag_Sequence ; flag: GA
1F1EC 1F1E7 ; RGI_Emoji_Flag_Sequence ; flag: GB
1F1EC 1F1E9 ; RGI_Emoji_Flag_Sequence ; flag: GD
1F1EC 1F1EA ; RGI_Emoji_Flag_Sequence ; flag: GE
1F1EC 1F1EB ; RGI_Emoji_Flag_Sequence ; flag: GF
1F1EC 1F1EC ; RGI_Emoji_Flag_Sequence ; flag: GG
1F1EC 1F1ED ; RGI_Emoji_Flag_Sequence ; flag: GH
1F1EC 1F1EE ; RGI_Emoji_Flag_Sequence ; flag: GI
1F1EC 1F1F1 ; RGI_Emoji_Flag_Sequence ; flag: GL
1F1EC 1F1F2 ; RGI_Emoji_Flag_Sequence ; flag: GM
1F1EC 1F1F3 ; RGI_Emoji_Flag_Sequence ; flag: GN
1F1EC 1F1F5 ; RGI_Emoji_Flag_Sequence ; flag: GP
1F1EC 1F1F6 ; RGI_Emoji_Flag_Sequence ; flag: GQ
1F1EC 1F1F7 ; RGI_Emoji_Flag_Sequence ; flag: GR
1F1EC 1F1F8 ; RGI_Emoji_Flag_Sequence ; flag: GS
1F1EC 1F1F9 ; RGI_Emoji_Flag_Sequence ; flag: GT
1F1EC 1F1FA ; RGI_Emoji_Flag_Sequence ; flag: GU
1F1EC 1F1FC ; RGI_Emoji_Flag_Sequence ; flag: GW
1F1EC 1F1FE ; RGI_Emoji_Flag_Sequence ; flag: GY
1F1ED 1F1F0 ; RGI_Emoji_Flag_Sequence ; flag: HK
1F1ED 1F1F2 ; RGI_Emoji_Flag_Sequence ; flag: HM
1F1ED 1F1F3 ; RGI_Emoji_Flag_Sequence ; flag: HN
1F1ED 1F1F7 ; RGI_Emoji_Flag_Sequence ; flag: HR
1F1ED 1F1F9 ; RGI_Emoji_Flag_Sequence ; flag: HT
1F1ED 1F1FA ; RGI_Emoji_Flag_Sequence ; flag: HU
1F1EE 1F1E8 ; RGI_Emoji_Flag_Sequence ; flag: IC
1F1EE 1F1E9 ; RGI_Emoji_Flag_Sequence ; flag: ID
1F1EE 1F1EA ; RGI_Emoji_Flag_Sequence ; flag: IE
1F1EE 1F1F1 ; RGI_Emoji_Flag_Sequence ; flag: IL
1F1EE 1F1F2 ; RGI_Emoji_Flag_Sequence ; flag: IM
1F1EE 1F1F3 ; RGI_Emoji_Flag_Sequence ; flag: IN
1F1EE 1F1F4 ; RGI_Emoji_Flag_Sequence ; flag: IO
1F1EE 1F1F6 ; RGI_Emoji_Flag_Sequence ; flag: IQ
1F1EE 1F1F7 ; RGI_Emoji_Flag_Sequence ; flag: IR
1F1EE 1F1F8 ; RGI_Emoji_Flag_Sequence ; flag: IS
1F1EE 1F1F9 ; RGI_Emoji_Flag_Sequence ; flag: IT
1F1EF 1F1EA ; RGI_Emoji_Flag_Sequence ; flag: JE
1F1EF 1F1F2 ; RGI_Emoji_Flag_Sequence ; flag: JM
1F1EF 1F1F4 ; RGI_Emoji_Flag_Sequence ; flag: JO
1F1EF 1F1F5 ; RGI_Emoji_Flag_Sequence ; flag: JP
1F1F0 1F1EA ; RGI_Emoji_Flag_Sequence ; flag: KE
1F1F0 1F1EC ; RGI_Emoji_Flag_Sequence ; flag: KG
1F1F0 1F1ED ; RGI_Emoji_Flag_Sequence ; flag: KH
1F1F0 1F1EE ; RGI_Emoji_Flag_Sequence ; flag: KI
1F1F0 1F1F2 ; RGI_Emoji_Flag_Sequence ; flag: KM
1F1F0 1F1F3 ; RGI_Emoji_Flag_Sequence ; flag: KN
1F1F0 1F1F5 ; RGI_Emoji_Flag_Sequence ; flag: KP
1F1F0 1F1F7 ; RGI_Emoji_Flag_Sequence ; flag: KR
1F1F0 1F1FC ; RGI_Emoji_Flag_Sequence ; flag: KW
1F1F0 1F1FE ; RGI_Emoji_Flag_Sequence ; flag: KY
1F1F0 1F1FF ; RGI_Emoji_Flag_Sequence ; flag: KZ
1F1F1 1F1E6 ; RGI_Emoji_Flag_Sequence ; flag: LA
1F1F1 1F1E7 ; RGI_Emoji_Flag_Sequence ; flag: LB
1F1F1 1F1E8 ; RGI_Emoji_Flag_Sequence ; flag: LC
1F1F1 1F1EE ; RGI_Emoji_Flag_Sequence ; flag: LI
1F1F1 1F1F0 ; RGI_Emoji_Flag_Sequence ; flag: LK
1F1F1 1F1F7 ; RGI_Emoji_Flag_Sequence ; flag: LR
1F1F1 1F1F8 ; RGI_Emoji_Flag_Sequence ; flag: LS
1F1F1 1F1F9 ; RGI_Emoji_Flag_Sequence ; flag: LT
1F1F1 1F1FA ; RGI_Emoji_Flag_Sequence ; flag: LU
1F1F1 1F1FB ; RGI_Emoji_Flag_Sequence ; flag: LV
1F1F1 1F1FE ; RGI_Emoji_Flag_Sequence ; flag: LY
1F1F2 1F1E6 ; RGI_Emoji_Flag_Sequence ; flag: MA
1F1F2 1F1E8 ; RGI_Emoji_Flag_Sequence ; flag: MC
1F1F2 1F1E9 ; RGI_Emoji_Flag_Sequence ; flag: MD
1F1F2 1F1EA ; RGI_Emoji_Flag_Sequence ; flag: ME
1F1F2 1F1EB ; RGI_Emoji_Flag_Sequence ; flag: MF
1F1F2 1F1EC ; RGI_Emoji_Flag_Sequence ; flag: MG
1F1F2 1F1ED ; RGI_Emoji_Flag_Sequence ; flag: MH
1F1F2 1F1F0 ; RGI_Emoji_Flag_Sequence ; flag: MK
1F1F2 1F1F1 ; RGI_Emoji_Flag_Sequence ; flag: ML
1F1F2 1F1F2 ; RGI_Emoji_Flag_Sequence ; flag: MM
1F1F2 1F1F3 ; RGI_Emoji_Flag_Sequence ; flag: MN
1F1F2 1F1F4 ; RGI_Emoji_Flag_Sequence ; flag: MO
1F1F2 1F1F5 ; RGI_Emoji_Flag_Sequence ; flag: MP
1F1F2 1F1F6 ; RGI_Emoji_Flag_Sequence ; flag: MQ
1F1F2 1F1F7 ; RGI_Emoji_Flag_Sequence ; flag: MR
1F1F2 1F1F8 ; RGI_Emoji_Flag_Sequence ; flag: MS
1F1F2 1F1F9 ; RGI_Emoji_Flag_Sequence ; flag: MT
1F1F2 1F1FA ; RGI_Emoji_Flag_Sequence ; flag: MU
1F1F2 1F1FB ; RGI_Emoji_Flag_Sequence ; flag: MV
1F1F2 1F1FC ; RGI_Emoji_Flag_Sequence ; flag: MW
1F1F2 1F1FD ; RGI_Emoji_Flag_Sequence ; flag: MX
1F1F2 1F1FE ; RGI_Emoji_Flag_Sequence ; flag: MY
1F1F2 1F1FF ; RGI_Emoji_Flag_Sequence ; flag: MZ
1F1F3 1F1E6 ; RGI_Emoji_Flag_Sequence ; flag: NA
1F1F3 1F1E8 ; RGI_Emoji_Flag_Sequence ; flag: NC
1F1F3 1F1EA ; RGI_Emoji_Flag_Sequence ; flag: NE
1F1F3 1F1EB ; RGI_Emoji_Flag_Sequence ; flag: NF
1F1F3 1F1EC ; RGI_Emoji_Flag_Sequence ; flag: NG
1F1F3 1F1EE ; RGI_Emoji_Flag_Sequence ; flag: NI
1F1F3 1F1F1 ; RGI_Emoji_Flag_Sequence ; flag: NL
1F1F3 1F1F4 ; RGI_Emoji_Flag_Sequence ; flag: NO
1F1F3 1F1F5 ; RGI_Emoji_Flag_Sequence ; flag: NP
1F1F3 1F1F7 ; RGI_Emoji_Flag_Sequence ; flag: NR
1F1F3 1F1FA ; RGI_Emoji_Flag_Sequence ; flag: NU
1F1F3 1F1FF ; RGI_Emoji_Flag_Sequence ; flag: NZ
1F1F4 1F1F2 ; RGI_Emoji_Flag_Sequence ; flag: OM
1F1F5 1F1E6 ; RGI_Emoji_Flag_Sequence ; flag: PA
1F1F5 1F1EA ; RGI_Emoji_Flag_Sequence ; flag: PE
1F1F5 1F1EB ; RGI_Emoji_Flag_Sequence ; flag: PF
1F1F5 1F1EC ; RGI_Emoji_Flag_Sequence ; flag: PG
1F1F5 1F1ED ; RGI_Emoji_Flag_Sequence ; flag: PH
1F1F5 1F1F0 ; RGI_Emoji_Flag_Sequence ; flag: PK
1F1F5 1F1F1 ; RGI_Emoji_Flag_Sequence ; flag: PL
1F1F5 1F1F2 ; RGI_Emoji_Flag_Sequence ; flag: PM
1F1F5 1F1F3 ; RGI_Emoji_Flag_Sequence ; flag: PN
1F1F5 1F1F7 ; RGI_Emoji_Flag_Sequence ; flag: PR
1F1F5 1F1F8 ; RGI_Emoji_Flag_Sequence ; flag: PS
1F1F5 1F1F9 ; RGI_Emoji_Flag_Sequence ; flag: PT
1F1F5 1F1FC ; RGI_Emoji_Flag_Sequence ; flag: PW
1F1F5 1F1FE ; RGI_Emoji_Flag_Sequence ; flag: PY
1F1F6 1F1E6 ; RGI_Emoji_Flag_Sequence ; flag: QA
1F1F7 1F1EA ; RGI_Emoji_Flag_Sequence ; flag: RE
1F1F7 1F1F4 ; RGI_Emoji_Flag_Sequence ; flag: RO
1F1F7 1F1F8 ; RGI_Emoji_Flag_Sequence ; flag: RS
1F1F7 1F1FA ; RGI_Emoji_Flag_Sequence ; flag: RU
1F1F7 1F1FC ; RGI_Emoji_Flag_Sequence ; flag: RW
1F1F8 1F1E6 ; RGI_Emoji_Flag_Sequence ; flag: SA
1F1F8 1F1E7 ; RGI_Emoji_Flag_Sequence ; flag: SB
1F1F8 1F1E8 ; RGI_Emoji_Flag_Sequence ; flag: SC
1F1F8 1F1E9 ; RGI_Emoji_Flag_Sequence ; flag: SD
1F1F8 1F1EA ; RGI_Emoji_Flag_Sequence ; flag: SE
1F1F8 1F1EC ; RGI_Emoji_Flag_Sequence ; flag: SG
1F1F8 1F1ED ; RGI_Emoji_Flag_Sequence ; flag: SH
1F1F8 1F1EE ; RGI_Emoji_Flag_Sequence ; flag: SI
1F1F8 1F1EF ; RGI_Emoji_Flag_Sequence ; flag: SJ
1F1F8 1F1F0 ; RGI_Emoji_Flag_Sequence ; flag: SK
1F1F8 1F1F1 ; RGI_Emoji_Flag_Sequence ; flag: SL
1F1F8 1F1F2 ; RGI_Emoji_Flag_Sequence ; flag: SM
1F1F8 1F1F3 ; RGI_Emoji_Flag_Sequence ; flag: SN
1F1F8 1F1F4 ; RGI_Emoji_Flag_Sequence ; flag: SO
1F1F8 1F1F7 ; RGI_Emoji_Flag_Sequence ; flag: SR
1F1F8 1F1F8 ; RGI_Emoji_Flag_Sequence ; flag: SS
1F1F8 1F1F9 ; RGI_Emoji_Flag_Sequence ; flag: ST
1F1F8 1F1FB ; RGI_Emoji_Flag_Sequence ; flag: SV
1F1F8 1F1FD ; RGI_Emoji_Flag_Sequence ; flag: SX
1F1F8 1F1FE ; RGI_Emoji_Flag_Sequence ; flag: SY
1F1F8 1F1FF ; RGI_Emoji_Flag_Sequence ; flag: SZ
1F1F9 1F1E6 ; RGI_Emoji_Flag_Sequence ; flag: TA
1F1F9 1F1E8 ; RGI_Emoji_Flag_Sequence ; flag: TC
1F1F9 1F1E9 ; RGI_Emoji_Flag_Sequence ; flag: TD
1F1F9 1F1EB ; RGI_Emoji_Flag_Sequence ; flag: TF
1F1F9 1F1EC ; RGI_Emoji_Flag_Sequence ; flag: TG
1F1F9 1F1ED ; RGI_Emoji_Flag_Sequence ; flag: TH
1F1F9 1F1EF ; RGI_Emoji_Flag_Sequence ; flag: TJ
1F1F9 1F1F0 ; RGI_Emoji_Flag_Sequence ; flag: TK
1F1F9 1F1F1 ; RGI_Emoji_Flag_Sequence ; flag: TL
1F1F9 1F1F2 ; RGI_Emoji_Flag_Sequence ; flag: TM
1F1F9 1F1F3 ; RGI_Emoji_Flag_Sequence ; flag: TN
1F1F9 1F1F4 ; RGI_Emoji_Flag_Sequence ; flag: TO
1F1F9 1F1F7 ; RGI_Emoji_Flag_Sequence ; flag: TR
1F1F9 1F1F9 ; RGI_Emoji_Flag_Sequence ; flag: TT
1F1F9 1F1FB ; RGI_Emoji_Flag_Sequence ; flag: TV
1F1F9 1F1FC ; RGI_Emoji_Flag_Sequence ; flag: TW
1F1F9 1F1FF ; RGI_Emoji_Flag_Sequence ; flag: TZ
1F1FA 1F1E6 ; RGI_Emoji_Flag_Sequence ; flag: UA
1F1FA 1F1EC ; RGI_Emoji_Flag_Sequence ; flag: UG
1F1FA 1F1F2 ; RGI_Emoji_Flag_Sequence ; flag: UM
1F1FA 1F1F3 ; RGI_Emoji_Flag_Sequence ; flag: UN
1F1FA 1F1F8 ; RGI_Emoji_Flag_Sequence ; flag: US
1F1FA 1F1FE ; RGI_Emoji_Flag_Sequence ; flag: UY
1F1FA 1F1FF ; RGI_Emoji_Flag_Sequence ; flag: UZ
1F1FB 1F1E6 ; RGI_Emoji_Flag_Sequence ; flag: VA
1F1FB 1F1E8 ; RGI_Emoji_Flag_Sequence ; flag: VC
1F1FB 1F1EA ; RGI_Emoji_Flag_Sequence ; flag: VE
1F1FB 1F1EC ; RGI_Emoji_Flag_Sequence ; flag: VG
1F1FB 1F1EE ; RGI_Emoji_Flag_Sequence ; flag: VI
1F1FB 1F1F3 ; RGI_Emoji_Flag_Sequence ; flag: VN
1F1FB 1F1FA ; RGI_Emoji_Flag_Sequence ; flag: VU
1F1FC 1F1EB ; RGI_Emoji_Flag_Sequence ; flag: WF
1F1FC 1F1F8 ; RGI_Emoji_Flag_Sequence ; flag: WS
1F1FD 1F1F0 ; RGI_Emoji_Flag_Sequence ; flag: XK
1F1FE 1F1EA ; RGI_Emoji_Flag_Sequence ; flag: YE
1F1FE 1F1F9 ; RGI_Emoji_Flag_Sequence ; flag: YT
1F1FF 1F1E6 ; RGI_Emoji_Flag_Sequence ; flag: ZA
1F1FF 1F1F2 ; RGI_Emoji_Flag_Sequence ; flag: ZM
1F1FF 1F1FC ; RGI_Emoji_Flag_Sequence ; flag: ZW

# RGI_Emoji_Tag_Sequence
1F3F4 E0067 E0062 E0065 E006E E0067 E007F ; RGI_Emoji_Tag_Sequence ; flag: England
1F3F4 E0067 E0062 E0073 E0063 E0074 E007F ; RGI_Emoji_Tag_Sequence ; flag: Scotland
1F3F4 E0067 E0062 E0077 E006C E0073 E007F ; RGI_Emoji_Tag_Sequence ; flag: Wales

# RGI_Emoji_ZWJ_Sequence
1F468 200D 1F4BB ; RGI_Emoji_ZWJ_Sequence ; man technologist
1F469 200D 1F4BB ; RGI_Emoji_ZWJ_Sequence ; woman technologist
1F9D1 200D 1F4BB ; RGI_Emoji_ZWJ_Sequence ; technologist
1F468 200D 1F680 ; RGI_Emoji_ZWJ_Sequence ; man astronaut
1F469 200D 1F680 ; RGI_Emoji_ZWJ_Sequence ; woman astronaut
1F9D1 200D 1F680 ; RGI_Emoji_ZWJ_Sequence ; astronaut
1F468 200D 1F373 ; RGI_Emoji_ZWJ_Sequence ; man cook
1F469 200D 1F373 ; RGI_Emoji_ZWJ_Sequence ; woman cook
1F468 200D 1F393 ; RGI_Emoji_ZWJ_Sequence ; man student
1F469 200D 1F393 ; RGI_Emoji_ZWJ_Sequence ; woman student
1F468 200D 1F3A8 ; RGI_Emoji_ZWJ_Sequence ; man artist
1F469 200D 1F3A8 ; RGI_Emoji_ZWJ_Sequence ; woman artist
1F468 200D 1F692 ; RGI_Emoji_ZWJ_Sequence ; man firefighter
1F469 200D 1F692 ; RGI_Emoji_ZWJ_Sequence ; woman firefighter
1F468 200D 2695 FE0F ; RGI_Emoji_ZWJ_Sequence ; man health worker
1F469 200D 2695 FE0F ; RGI_Emoji_ZWJ_Sequence ; woman health worker
1F468 200D 2696 FE0F ; RGI_Emoji_ZWJ_Sequence ; man judge
1F469 200D 2696 FE0F ; RGI_Emoji_ZWJ_Sequence ; woman judge
1F468 200D 2708 FE0F ; RGI_Emoji_ZWJ_Sequence ; man pilot
1F469 200D 2708 FE0F ; RGI_Emoji_ZWJ_Sequence ; woman pilot
1F468 200D 1F9B0 ; RGI_Emoji_ZWJ_Sequence ; man: red hair
1F469 200D 1F9B1 ; RGI_Emoji_ZWJ_Sequence ; woman: curly hair
1F468 200D 1F9B3 ; RGI_Emoji_ZWJ_Sequence ; man: white hair
1F469 200D 1F9B2 ; RGI_Emoji_ZWJ_Sequence ; woman: bald
1F9D1 200D 1F9AF ; RGI_Emoji_ZWJ_Sequence ; person with white cane
1F9D1 200D 1F9BC ; RGI_Emoji_ZWJ_Sequence ; person in motorized wheelchair
1F9D1 200D 1F384 ; RGI_Emoji_ZWJ_Sequence ; mx claus
1F3C3 200D 2642 FE0F ; RGI_Emoji_ZWJ_Sequence ; man running
1F3C3 200D 2640 FE0F ; RGI_Emoji_ZWJ_Sequence ; woman running
1F46E 200D 2642 FE0F ; RGI_Emoji_ZWJ_Sequence ; man police officer
1F46E 200D 2640 FE0F ; RGI_Emoji_ZWJ_Sequence ; woman police officer
1F575 FE0F 200D 2642 FE0F ; RGI_Emoji_ZWJ_Sequence ; man detective
1F3CC FE0F 200D 2640 FE0F ; RGI_Emoji_ZWJ_Sequence ; woman golfing
1F468 1F3FD 200D 1F4BB ; RGI_Emoji_ZWJ_Sequence ; man technologist: medium skin tone
1F469 1F3FB 200D 1F52C ; RGI_Emoji_ZWJ_Sequence ; woman scientist: light skin tone
1F9D1 1F3FF 200D 1F33E ; RGI_Emoji_ZWJ_Sequence ; farmer: dark skin tone
1F468 200D 1F469 200D 1F467 ; RGI_Emoji_ZWJ_Sequence ; family: man, woman, girl
1F468 200D 1F469 200D 1F467 200D 1F466 ; RGI_Emoji_ZWJ_Sequence ; family: man, woman, girl, boy
1F9D1 200D 1F91D 200D 1F9D1 ; RGI_Emoji_ZWJ_Sequence ; people holding hands
1F469 200D 2764 FE0F 200D 1F468 ; RGI_Emoji_ZWJ_Sequence ; couple with heart: woman, man
1F468 200D 2764 FE0F 200D 1F468 ; RGI_Emoji_ZWJ_Sequence ; couple with heart: man, man
1F469 200D 2764 FE0F 200D 1F48B 200D 1F468 ; RGI_Emoji_ZWJ_Sequence ; kiss: woman, man
1F3F3 FE0F 200D 1F308 ; RGI_Emoji_ZWJ_Sequence ; rainbow flag
1F3F3 FE0F 200D 26A7 FE0F ; RGI_Emoji_ZWJ_Sequence ; transgender flag
1F3F4 200D 2620 FE0F ; RGI_Emoji_ZWJ_Sequence ; pirate flag
1F415 200D 1F9BA ; RGI_Emoji_ZWJ_Sequence ; service dog
1F408 200D 2B1B ; RGI_Emoji_ZWJ_Sequence ; black cat
1F43B 200D 2744 FE0F ; RGI_Emoji_ZWJ_Sequence ; polar bear
1F426 200D 2B1B ; RGI_Emoji_ZWJ_Sequence ; black bird
1F441 FE0F 200D 1F5E8 FE0F ; RGI_Emoji_ZWJ_Sequence ; eye in speech bubble
1F62E 200D 1F4A8 ; RGI_Emoji_ZWJ_Sequence ; face exhaling
1F635 200D 1F4AB ; RGI_Emoji_ZWJ_Sequence ; face with spiral eyes
1F636 200D 1F32B FE0F ; RGI_Emoji_ZWJ_Sequence ; face in clouds
2764 FE0F 200D 1F525 ; RGI_Emoji_ZWJ_Sequence ; heart on fire
2764 FE0F 200D 1FA79 ; RGI_Emoji_ZWJ_Sequence ; mending heart

# RGI_Emoji_Modifier_Sequence
261D 1F3FB ; RGI_Emoji_Modifier_Sequence
261D 1F3FC ; RGI_Emoji_Modifier_Sequence
261D 1F3FD ; RGI_Emoji_Modifier_Sequence
261D 1F3FE ; RGI_Emoji_Modifier_Sequence
261D 1F3FF ; RGI_Emoji_Modifier_Sequence
26F9 1F3FB ; RGI_Emoji_Modifier_Sequence
26F9 1F3FC ; RGI_Emoji_Modifier_Sequence
26F9 1F3FD ; RGI_Emoji_Modifier_Sequence
26F9 1F3FE ; RGI_Emoji_Modifier_Sequence
26F9 1F3FF ; RGI_Emoji_Modifier_Sequence
270A 1F3FB ; RGI_Emoji_Modifier_Sequence
270A 1F3FC ; RGI_Emoji_Modifier_Sequence
270A 1F3FD ; RGI_Emoji_Modifier_Sequence
270A 1F3FE ; RGI_Emoji_Modifier_Sequence
270A 1F3FF ; RGI_Emoji_Modifier_Sequence
270B 1F3FB ; RGI_Emoji_Modifier_Sequence
270B 1F3FC ; RGI_Emoji_Modifier_Sequence
270B 1F3FD ; RGI_Emoji_Modifier_Sequence
270B 1F3FE ; RGI_Emoji_Modifier_Sequence
270B 1F3FF ; RGI_Emoji_Modifier_Sequence
270C 1F3FB ; RGI_Emoji_Modifier_Sequence
270C 1F3FC ; RGI_Emoji_Modifier_Sequence
270C 1F3FD ; RGI_Emoji_Modifier_Sequence
270C 1F3FE ; RGI_Emoji_Modifier_Sequence
270C 1F3FF ; RGI_Emoji_Modifier_Sequence
270D 1F3FB ; RGI_Emoji_Modifier_Sequence
270D 1F3FC ; RGI_Emoji_Modifier_Sequence
270D 1F3FD ; RGI_Emoji_Modifier_Sequence
270D 1F3FE ; RGI_Emoji_Modifier_Sequence
270D 1F3FF ; RGI_Emoji_Modifier_Sequence
1F385 1F3FB ; RGI_Emoji_Modifier_Sequence
1F385 1F3FC ; RGI_Emoji_Modifier_Sequence
1F385 1F3FD ; RGI_Emoji_Modifier_Sequence
1F385 1F3FE ; RGI_Emoji_Modifier_Sequence
1F385 1F3FF ; RGI_Emoji_Modifier_Sequence
1F3C2 1F3FB ; RGI_Emoji_Modifier_Sequence
1F3C2 1F3FC ; RGI_Emoji_Modifier_Sequence
1F3C2 1F3FD ; RGI_Emoji_Modifier_Sequence
1F3C2 1F3FE ; RGI_Emoji_Modifier_Sequence
1F3C2 1F3FF ; RGI_Emoji_Modifier_Sequence
1F3C3 1F3FB ; RGI_Emoji_Modifier_Sequence
1F3C3 1F3FC ; RGI_Emoji_Modifier_Sequence
1F3C3 1F3FD ; RGI_Emoji_Modifier_Sequence
1F3C3 1F3FE ; RGI_Emoji_Modifier_Sequence
1F3C3 1F3FF ; RGI_Emoji_Modifier_Sequence
1F3C4 1F3FB ; RGI_Emoji_Modifier_Sequence
1F3C4 1F3FC ; RGI_Emoji_Modifier_Sequence
1F3C4 1F3FD ; RGI_Emoji_Modifier_Sequence
1F3C4 1F3FE ; RGI_Emoji_Modifier_Sequence
1F3C4 1F3FF ; RGI_Emoji_Modifier_Sequence
1F3C7 1F3FB ; RGI_Emoji_Modifier_Sequence
1F3C7 1F3FC ; RGI_Emoji_Modifier_Sequence
1F3C7 1F3FD ; RGI_Emoji_Modifier_Sequence
1F3C7 1F3FE ; RGI_Emoji_Modifier_Sequence
1F3C7 1F3FF ; RGI_Emoji_Modifier_Sequence
1F3CA 1F3FB ; RGI_Emoji_Modifier_Sequence
1F3CA 1F3FC ; RGI_Emoji_Modifier_Sequence
1F3CA 1F3FD ; RGI_Emoji_Modifier_Sequence
1F3CA 1F3FE ; RGI_Emoji_Modifier_Sequence
1F3CA 1F3FF ; RGI_Emoji_Modifier_Sequence
1F3CB 1F3FB ; RGI_Emoji_Modifier_Sequence
1F3CB 1F3FC ; RGI_Emoji_Modifier_Sequence
1F3CB 1F3FD ; RGI_Emoji_Modifier_Sequence
1F3CB 1F3FE ; RGI_Emoji_Modifier_Sequence
1F3CB 1F3FF ; RGI_Emoji_Modifier_Sequence
1F3CC 1F3FB ; RGI_Emoji_Modifier_Sequence
1F3CC 1F3FC ; RGI_Emoji_Modifier_Sequence
1F3CC 1F3FD ; RGI_Emoji_Modifier_Sequence
1F3CC 1F3FE ; RGI_Emoji_Modifier_Sequence
1F3CC 1F3FF ; RGI_Emoji_Modifier_Sequence
1F442 1F3FB ; RGI_Emoji_Modifier_Sequence
1F442 1F3FC ; RGI_Emoji_Modifier_Sequence
1F442 1F3FD ; RGI_Emoji_Modifier_Sequence
1F442 1F3FE ; RGI_Emoji_Modifier_Sequence
1F442 1F3FF ; RGI_Emoji_Modifier_Sequence
1F443 1F3FB ; RGI_Emoji_Modifier_Sequence
1F443 1F3FC ; RGI_Emoji_Modifier_Sequence
1F443 1F3FD ; RGI_Emoji_Modifier_Sequence
1F443 1F3FE ; RGI_Emoji_Modifier_Sequence
1F443 1F3FF ; RGI_Emoji_Modifier_Sequence
1F446 1F3FB ; RGI_Emoji_Modifier_Sequence
1F446 1F3FC ; RGI_Emoji_Modifier_Sequence
1F446 1F3FD ; RGI_Emoji_Modifier_Sequence
1F446 1F3FE ; RGI_Emoji_Modifier_Sequence
1F446 1F3FF ; RGI_Emoji_Modifier_Sequence
1F447 1F3FB ; RGI_Emoji_Modifier_Sequence
1F447 1F3FC ; RGI_Emoji_Modifier_Sequence
1F447 1F3FD ; RGI_Emoji_Modifier_Sequence
1F447 1F3FE ; RGI_Emoji_Modifier_Sequence
1F447 1F3FF ; RGI_Emoji_Modifier_Sequence
1F448 1F3FB ; RGI_Emoji_Modifier_Sequence
1F448 1F3FC ; RGI_Emoji_Modifier_Sequence
1F448 1F3FD ; RGI_Emoji_Modifier_Sequence
1F448 1F3FE ; RGI_Emoji_Modifier_Sequence
1F448 1F3FF ; RGI_Emoji_Modifier_Sequence
1F449 1F3FB ; RGI_Emoji_Modifier_Sequence
1F449 1F3FC ; RGI_Emoji_Modifier_Sequence
1F449 1F3FD ; RGI_Emoji_Modifier_Sequence
1F449 1F3FE ; RGI_Emoji_Modifier_Sequence
1F449 1F3FF ; RGI_Emoji_Modifier_Sequence
1F44A 1F3FB ; RGI_Emoji_Modifier_Sequence
1F44A 1F3FC ; RGI_Emoji_Modifier_Sequence
1F44A 1F3FD ; RGI_Emoji_Modifier_Sequence
1F44A 1F3FE ; RGI_Emoji_Modifier_Sequence
1F44A 1F3FF ; RGI_Emoji_Modifier_Sequence
1F44B 1F3FB ; RGI_Emoji_Modifier_Sequence
1F44B 1F3FC ; RGI_Emoji_Modifier_Sequence
1F44B 1F3FD ; RGI_Emoji_Modifier_Sequence
1F44B 1F3FE ; RGI_Emoji_Modifier_Sequence
1F44B 1F3FF ; RGI_Emoji_Modifier_Sequence
1F44C 1F3FB ; RGI_Emoji_Modifier_Sequence
1F44C 1F3FC ; RGI_Emoji_Modifier_Sequence
1F44C 1F3FD ; RGI_Emoji_Modifier_Sequence
1F44C 1F3FE ; RGI_Emoji_Modifier_Sequence
1F44C 1F3FF ; RGI_Emoji_Modifier_Sequence
1F44D 1F3FB ; RGI_Emoji_Modifier_Sequence
1F44D 1F3FC ; RGI_Emoji_Modifier_Sequence
1F44D 1F3FD ; RGI_Emoji_Modifier_Sequence
1F44D 1F3FE ; RGI_Emoji_Modifier_Sequence
1F44D 1F3FF ; RGI_Emoji_Modifier_Sequence
1F44E 1F3FB ; RGI_Emoji_Modifier_Sequence
1F44E 1F3FC ; RGI_Emoji_Modifier_Sequence
1F44E 1F3FD ; RGI_Emoji_Modifier_Sequence
1F44E 1F3FE ; RGI_Emoji_Modifier_Sequence
1F44E 1F3FF ; RGI_Emoji_Modifier_Sequence
1F44F 1F3FB ; RGI_Emoji_Modifier_Sequence
1F44F 1F3FC ; RGI_Emoji_Modifier_Sequence
1F44F 1F3FD ; RGI_Emoji_Modifier_Sequence
1F44F 1F3FE ; RGI_Emoji_Modifier_Sequence
1F44F 1F3FF ; RGI_Emoji_Modifier_Sequence
1F450 1F3FB ; RGI_Emoji_Modifier_Sequence
1F450 1F3FC ; RGI_Emoji_Modifier_Sequence
1F450 1F3FD ; RGI_Emoji_Modifier_Sequence
1F450 1F3FE ; RGI_Emoji_Modifier_Sequence
1F450 1F3FF ; RGI_Emoji_Modifier_Sequence
1F466 1F3FB ; RGI_Emoji_Modifier_Sequence
1F466 1F3FC ; RGI_Emoji_Modifier_Sequence
1F466 1F3FD ; RGI_Emoji_Modifier_Sequence
1F466 1F3FE ; RGI_Emoji_Modifier_Sequence
1F466 1F3FF ; RGI_Emoji_Modifier_Sequence
1F467 1F3FB ; RGI_Emoji_Modifier_Sequence
1F467 1F3FC ; RGI_Emoji_Modifier_Sequence
1F467 1F3FD ; RGI_Emoji_Modifier_Sequence
1F467 1F3FE ; RGI_Emoji_Modifier_Sequence
1F467 1F3FF ; RGI_Emoji_Modifier_Sequence
1F468 1F3FB ; RGI_Emoji_Modifier_Sequence
1F468 1F3FC ; RGI_Emoji_Modifier_Sequence
1F468 1F3FD ; RGI_Emoji_Modifier_Sequence
1F468 1F3FE ; RGI_Emoji_Modifier_Sequence
1F468 1F3FF ; RGI_Emoji_Modifier_Sequence
1F469 1F3FB ; RGI_Emoji_Modifier_Sequence
1F469 1F3FC ; RGI_Emoji_Modifier_Sequence
1F469 1F3FD ; RGI_Emoji_Modifier_Sequence
1F469 1F3FE ; RGI_Emoji_Modifier_Sequence
1F469 1F3FF ; RGI_Emoji_Modifier_Sequence
1F46B 1F3FB ; RGI_Emoji_Modifier_Sequence
1F46B 1F3FC ; RGI_Emoji_Modifier_Sequence
1F46B 1F3FD ; RGI_Emoji_Modifier_Sequence
1F46B 1F3FE ; RGI_Emoji_Modifier_Sequence
1F46B 1F3FF ; RGI_Emoji_Modifier_Sequence
1F46C 1F3FB ; RGI_Emoji_Modifier_Sequence
1F46C 1F3FC ; RGI_Emoji_Modifier_Sequence
1F46C 1F3FD ; RGI_Emoji_Modifier_Sequence
1F46C 1F3FE ; RGI_Emoji_Modifier_Sequence
1F46C 1F3FF ; RGI_Emoji_Modifier_Sequence
1F46D 1F3FB ; RGI_Emoji_Modifier_Sequence
1F46D 1F3FC ; RGI_Emoji_Modifier_Sequence
1F46D 1F3FD ; RGI_Emoji_Modifier_Sequence
1F46D 1F3FE ; RGI_Emoji_Modifier_Sequence
1F46D 1F3FF ; RGI_Emoji_Modifier_Sequence
1F46E 1F3FB ; RGI_Emoji_Modifier_Sequence
1F46E 1F3FC ; RGI_Emoji_Modifier_Sequence
1F46E 1F3FD ; RGI_Emoji_Modifier_Sequence
1F46E 1F3FE ; RGI_Emoji_Modifier_Sequence
1F46E 1F3FF ; RGI_Emoji_Modifier_Sequence
1F470 1F3FB ; RGI_Emoji_Modifier_Sequence
1F470 1F3FC ; RGI_Emoji_Modifier_Sequence
1F470 1F3FD ; RGI_Emoji_Modifier_Sequence
1F470 1F3FE ; RGI_Emoji_Modifier_Sequence
1F470 1F3FF ; RGI_Emoji_Modifier_Sequence
1F471 1F3FB ; RGI_Emoji_Modifier_Sequence
1F471 1F3FC ; RGI_Emoji_Modifier_Sequence
1F471 1F3FD ; RGI_Emoji_Modifier_Sequence
1F471 1F3FE ; RGI_Emoji_Modifier_Sequence
1F471 1F3FF ; RGI_Emoji_Modifier_Sequence
1F472 1F3FB ; RGI_Emoji_Modifier_Sequence
1F472 1F3FC ; RGI_Emoji_Modifier_Sequence
1F472 1F3FD ; RGI_Emoji_Modifier_Sequence
1F472 1F3FE ; RGI_Emoji_Modifier_Sequence
1F472 1F3FF ; RGI_Emoji_Modifier_Sequence
1F473 1F3FB ; RGI_Emoji_Modifier_Sequence
1F473 1F3FC ; RGI_Emoji_Modifier_Sequence
1F473 1F3FD ; RGI_Emoji_Modifier_Sequence
1F473 1F3FE ; RGI_Emoji_Modifier_Sequence
1F473 1F3FF ; RGI_Emoji_Modifier_Sequence
1F474 1F3FB ; RGI_Emoji_Modifier_Sequence
1F474 1F3FC ; RGI_Emoji_Modifier_Sequence
1F474 1F3FD ; RGI_Emoji_Modifier_Sequence
1F474 1F3FE ; RGI_Emoji_Modifier_Sequence
1F474 1F3FF ; RGI_Emoji_Modifier_Sequence
1F475 1F3FB ; RGI_Emoji_Modifier_Sequence
1F475 1F3FC ; RGI_Emoji_Modifier_Sequence
1F475 1F3FD ; RGI_Emoji_Modifier_Sequence
1F475 1F3FE ; RGI_Emoji_Modifier_Sequence
1F475 1F3FF ; RGI_Emoji_Modifier_Sequence
1F476 1F3FB ; RGI_Emoji_Modifier_Sequence
1F476 1F3FC ; RGI_Emoji_Modifier_Sequence
1F476 1F3FD ; RGI_Emoji_Modifier_Sequence
1F476 1F3FE ; RGI_Emoji_Modifier_Sequence
1F476 1F3FF ; RGI_Emoji_Modifier_Sequence
1F477 1F3FB ; RGI_Emoji_Modifier_Sequence
1F477 1F3FC ; RGI_Emoji_Modifier_Sequence
1F477 1F3FD ; RGI_Emoji_Modifier_Sequence
1F477 1F3FE ; RGI_Emoji_Modifier_Sequence
1F477 1F3FF ; RGI_Emoji_Modifier_Sequence
1F478 1F3FB ; RGI_Emoji_Modifier_Sequence
1F478 1F3FC ; RGI_Emoji_Modifier_Sequence
1F478 1F3FD ; RGI_Emoji_Modifier_Sequence
1F478 1F3FE ; RGI_Emoji_Modifier_Sequence
1F478 1F3FF ; RGI_Emoji_Modifier_Sequence
1F47C 1F3FB ; RGI_Emoji_Modifier_Sequence
1F47C 1F3FC ; RGI_Emoji_Modifier_Sequence
1F47C 1F3FD ; RGI_Emoji_Modifier_Sequence
1F47C 1F3FE ; RGI_Emoji_Modifier_Sequence
1F47C 1F3FF ; RGI_Emoji_Modifier_Sequence
1F481 1F3FB ; RGI_Emoji_Modifier_Sequence
1F481 1F3FC ; RGI_Emoji_Modifier_Sequence
1F481 1F3FD ; RGI_Emoji_Modifier_Sequence
1F481 1F3FE ; RGI_Emoji_Modifier_Sequence
1F481 1F3FF ; RGI_Emoji_Modifier_Sequence
1F482 1F3FB ; RGI_Emoji_Modifier_Sequence
1F482 1F3FC ; RGI_Emoji_Modifier_Sequence
1F482 1F3FD ; RGI_Emoji_Modifier_Sequence
1F482 1F3FE ; RGI_Emoji_Modifier_Sequence
1F482 1F3FF ; RGI_Emoji_Modifier_Sequence
1F483 1F3FB ; RGI_Emoji_Modifier_Sequence
1F483 1F3FC ; RGI_Emoji_Modifier_Sequence
1F483 1F3FD ; RGI_Emoji_Modifier_Sequence
1F483 1F3FE ; RGI_Emoji_Modifier_Sequence
1F483 1F3FF ; RGI_Emoji_Modifier_Sequence
1F485 1F3FB ; RGI_Emoji_Modifier_Sequence
1F485 1F3FC ; RGI_Emoji_Modifier_Sequence
1F485 1F3FD ; RGI_Emoji_Modifier_Sequence
1F485 1F3FE ; RGI_Emoji_Modifier_Sequence
1F485 1F3FF ; RGI_Emoji_Modifier_Sequence
1F486 1F3FB ; RGI_Emoji_Modifier_Sequence
1F486 1F3FC ; RGI_Emoji_Modifier_Sequence
1F486 1F3FD ; RGI_Emoji_Modifier_Sequence
1F486 1F3FE ; RGI_Emoji_Modifier_Sequence
1F486 1F3FF ; RGI_Emoji_Modifier_Sequence
1F487 1F3FB ; RGI_Emoji_Modifier_Sequence
1F487 1F3FC ; RGI_Emoji_Modifier_Sequence
1F487 1F3FD ; RGI_Emoji_Modifier_Sequence
1F487 1F3FE ; RGI_Emoji_Modifier_Sequence
1F487 1F3FF ; RGI_Emoji_Modifier_Sequence
1F48F 1F3FB ; RGI_Emoji_Modifier_Sequence
1F48F 1F3FC ; RGI_Emoji_Modifier_Sequence
1F48F 1F3FD ; RGI_Emoji_Modifier_Sequence
1F48F 1F3FE ; RGI_Emoji_Modifier_Sequence
1F48F 1F3FF ; RGI_Emoji_Modifier_Sequence
1F491 1F3FB ; RGI_Emoji_Modifier_Sequence
1F491 1F3FC ; RGI_Emoji_Modifier_Sequence
1F491 1F3FD ; RGI_Emoji_Modifier_Sequence
1F491 1F3FE ; RGI_Emoji_Modifier_Sequence
1F491 1F3FF ; RGI_Emoji_Modifier_Sequence
1F4AA 1F3FB ; RGI_Emoji_Modifier_Sequence
1F4AA 1F3FC ; RGI_Emoji_Modifier_Sequence
1F4AA 1F3FD ; RGI_Emoji_Modifier_Sequence
1F4AA 1F3FE ; RGI_Emoji_Modifier_Sequence
1F4AA 1F3FF ; RGI_Emoji_Modifier_Sequence
1F574 1F3FB ; RGI_Emoji_Modifier_Sequence
1F574 1F3FC ; RGI_Emoji_Modifier_Sequence
1F574 1F3FD ; RGI_Emoji_Modifier_Sequence
1F574 1F3FE ; RGI_Emoji_Modifier_Sequence
1F574 1F3FF ; RGI_Emoji_Modifier_Sequence
1F575 1F3FB ; RGI_Emoji_Modifier_Sequence
1F575 1F3FC ; RGI_Emoji_Modifier_Sequence
1F575 1F3FD ; RGI_Emoji_Modifier_Sequence
1F575 1F3FE ; RGI_Emoji_Modifier_Sequence
1F575 1F3FF ; RGI_Emoji_Modifier_Sequence
1F57A 1F3FB ; RGI_Emoji_Modifier_Sequence
1F57A 1F3FC ; RGI_Emoji_Modifier_Sequence
1F57A 1F3FD ; RGI_Emoji_Modifier_Sequence
1F57A 1F3FE ; RGI_Emoji_Modifier_Sequence
1F57A 1F3FF ; RGI_Emoji_Modifier_Sequence
1F590 1F3FB ; RGI_Emoji_Modifier_Sequence
1F590 1F3FC ; RGI_Emoji_Modifier_Sequence
1F590 1F3FD ; RGI_Emoji_Modifier_Sequence
1F590 1F3FE ; RGI_Emoji_Modifier_Sequence
1F590 1F3FF ; RGI_Emoji_Modifier_Sequence
1F595 1F3FB ; RGI_Emoji_Modifier_Sequence
1F595 1F3FC ; RGI_Emoji_Modifier_Sequence
1F595 1F3FD ; RGI_Emoji_Modifier_Sequence
1F595 1F3FE ; RGI_Emoji_Modifier_Sequence
1F595 1F3FF ; RGI_Emoji_Modifier_Sequence
1F596 1F3FB ; RGI_Emoji_Modifier_Sequence
1F596 1F3FC ; RGI_Emoji_Modifier_Sequence
1F596 1F3FD ; RGI_Emoji_Modifier_Sequence
1F596 1F3FE ; RGI_Emoji_Modifier_Sequence
1F596 1F3FF ; RGI_Emoji_Modifier_Sequence
1F645 1F3FB ; RGI_Emoji_Modifier_Sequence
1F645 1F3FC ; RGI_Emoji_Modifier_Sequence
1F645 1F3FD ; RGI_Emoji_Modifier_Sequence
1F645 1F3FE ; RGI_Emoji_Modifier_Sequence
1F645 1F3FF ; RGI_Emoji_Modifier_Sequence
1F646 1F3FB ; RGI_Emoji_Modifier_Sequence
1F646 1F3FC ; RGI_Emoji_Modifier_Sequence
1F646 1F3FD ; RGI_Emoji_Modifier_Sequence
1F646 1F3FE ; RGI_Emoji_Modifier_Sequence
1F646 1F3FF ; RGI_Emoji_Modifier_Sequence
1F647 1F3FB ; RGI_Emoji_Modifier_Sequence
1F647 1F3FC ; RGI_Emoji_Modifier_Sequence
1F647 1F3FD ; RGI_Emoji_Modifier_Sequence
1F647 1F3FE ; RGI_Emoji_Modifier_Sequence
1F647 1F3FF ; RGI_Emoji_Modifier_Sequence
1F64B 1F3FB ; RGI_Emoji_Modifier_Sequence
1F64B 1F3FC ; RGI_Emoji_Modifier_Sequence
1F64B 1F3FD ; RGI_Emoji_Modifier_Sequence
1F64B 1F3FE ; RGI_Emoji_Modifier_Sequence
1F64B 1F3FF ; RGI_Emoji_Modifier_Sequence
1F64C 1F3FB ; RGI_Emoji_Modifier_Sequence
1F64C 1F3FC ; RGI_Emoji_Modifier_Sequence
1F64C 1F3FD ; RGI_Emoji_Modifier_Sequence
1F64C 1F3FE ; RGI_Emoji_Modifier_Sequence
1F64C 1F3FF ; RGI_Emoji_Modifier_Sequence
1F64D 1F3FB ; RGI_Emoji_Modifier_Sequence
1F64D 1F3FC ; RGI_Emoji_Modifier_Sequence
1F64D 1F3FD ; RGI_Emoji_Modifier_Sequence
1F64D 1F3FE ; RGI_Emoji_Modifier_Sequence
1F64D 1F3FF ; RGI_Emoji_Modifier_Sequence
1F64E 1F3FB ; RGI_Emoji_Modifier_Sequence
1F64E 1F3FC ; RGI_Emoji_Modifier_Sequence
1F64E 1F3FD ; RGI_Emoji_Modifier_Sequence
1F64E 1F3FE ; RGI_Emoji_Modifier_Sequence
1F64E 1F3FF ; RGI_Emoji_Modifier_Sequence
1F64F 1F3FB ; RGI_Emoji_Modifier_Sequence
1F64F 1F3FC ; RGI_Emoji_Modifier_Sequence
1F64F 1F3FD ; RGI_Emoji_Modifier_Sequence
1F64F 1F3FE ; RGI_Emoji_Modifier_Sequence
1F64F 1F3FF ; RGI_Emoji_Modifier_Sequence
1F6A3 1F3FB ; RGI_Emoji_Modifier_Sequence
1F6A3 1F3FC ; RGI_Emoji_Modifier_Sequence
1F6A3 1F3FD ; RGI_Emoji_Modifier_Sequence
1F6A3 1F3FE ; RGI_Emoji_Modifier_Sequence
1F6A3 1F3FF ; RGI_Emoji_Modifier_Sequence
1F6B4 1F3FB ; RGI_Emoji_Modifier_Sequence
1F6B4 1F3FC ; RGI_Emoji_Modifier_Sequence
1F6B4 1F3FD ; RGI_Emoji_Modifier_Sequence
1F6B4 1F3FE ; RGI_Emoji_Modifier_Sequence
1F6B4 1F3FF ; RGI_Emoji_Modifier_Sequence
1F6B5 1F3FB ; RGI_Emoji_Modifier_Sequence
1F6B5 1F3FC ; RGI_Emoji_Modifier_Sequence
1F6B5 1F3FD ; RGI_Emoji_Modifier_Sequence
1F6B5 1F3FE ; RGI_Emoji_Modifier_Sequence
1F6B5 1F3FF ; RGI_Emoji_Modifier_Sequence
1F6B6 1F3FB ; RGI_Emoji_Modifier_Sequence
1F6B6 1F3FC ; RGI_Emoji_Modifier_Sequence
1F6B6 1F3FD ; RGI_Emoji_Modifier_Sequence
1F6B6 1F3FE ; RGI_Emoji_Modifier_Sequence
1F6B6 1F3FF ; RGI_Emoji_Modifier_Sequence
1F6C0 1F3FB ; RGI_Emoji_Modifier_Sequence
1F6C0 1F3FC ; RGI_Emoji_Modifier_Sequence
1F6C0 1F3FD ; RGI_Emoji_Modifier_Sequence
1F6C0 1F3FE ; RGI_Emoji_Modifier_Sequence
1F6C0 1F3FF ; RGI_Emoji_Modifier_Sequence
1F6CC 1F3FB ; RGI_Emoji_Modifier_Sequence
1F6CC 1F3FC ; RGI_Emoji_Modifier_Sequence
1F6CC 1F3FD ; RGI_Emoji_Modifier_Sequence
1F6CC 1F3FE ; RGI_Emoji_Modifier_Sequence
1F6CC 1F3FF ; RGI_Emoji_Modifier_Sequence
1F90C 1F3FB ; RGI_Emoji_Modifier_Sequence
1F90C 1F3FC ; RGI_Emoji_Modifier_Sequence
1F90C 1F3FD ; RGI_Emoji_Modifier_Sequence
1F90C 1F3FE ; RGI_Emoji_Modifier_Sequence
1F90C 1F3FF ; RGI_Emoji_Modifier_Sequence
1F90F 1F3FB ; RGI_Emoji_Modifier_Sequence
1F90F 1F3FC ; RGI_Emoji_Modifier_Sequence
1F90F 1F3FD ; RGI_Emoji_Modifier_Sequence
1F90F 1F3FE ; RGI_Emoji_Modifier_Sequence
1F90F 1F3FF ; RGI_Emoji_Modifier_Sequence
1F918 1F3FB ; RGI_Emoji_Modifier_Sequence
1F918 1F3FC ; RGI_Emoji_Modifier_Sequence
1F918 1F3FD ; RGI_Emoji_Modifier_Sequence
1F918 1F3FE ; RGI_Emoji_Modifier_Sequence
1F918 1F3FF ; RGI_Emoji_Modifier_Sequence
1F919 1F3FB ; RGI_Emoji_Modifier_Sequence
1F919 1F3FC ; RGI_Emoji_Modifier_Sequence
1F919 1F3FD ; RGI_Emoji_Modifier_Sequence
1F919 1F3FE ; RGI_Emoji_Modifier_Sequence
1F919 1F3FF ; RGI_Emoji_Modifier_Sequence
1F91A 1F3FB ; RGI_Emoji_Modifier_Sequence
1F91A 1F3FC ; RGI_Emoji_Modifier_Sequence
1F91A 1F3FD ; RGI_Emoji_Modifier_Sequence
1F91A 1F3FE ; RGI_Emoji_Modifier_Sequence
1F91A 1F3FF ; RGI_Emoji_Modifier_Sequence
1F91B 1F3FB ; RGI_Emoji_Modifier_Sequence
1F91B 1F3FC ; RGI_Emoji_Modifier_Sequence
1F91B 1F3FD ; RGI_Emoji_Modifier_Sequence
1F91B 1F3FE ; RGI_Emoji_Modifier_Sequence
1F91B 1F3FF ; RGI_Emoji_Modifier_Sequence
1F91C 1F3FB ; RGI_Emoji_Modifier_Sequence
1F91C 1F3FC ; RGI_Emoji_Modifier_Sequence
1F91C 1F3FD ; RGI_Emoji_Modifier_Sequence
1F91C 1F3FE ; RGI_Emoji_Modifier_Sequence
1F91C 1F3FF ; RGI_Emoji_Modifier_Sequence
1F91D 1F3FB ; RGI_Emoji_Modifier_Sequence
1F91D 1F3FC ; RGI_Emoji_Modifier_Sequence
1F91D 1F3FD ; RGI_Emoji_Modifier_Sequence
1F91D 1F3FE ; RGI_Emoji_Modifier_Sequence
1F91D 1F3FF ; RGI_Emoji_Modifier_Sequence
1F91E 1F3FB ; RGI_Emoji_Modifier_Sequence
1F91E 1F3FC ; RGI_Emoji_Modifier_Sequence
1F91E 1F3FD ; RGI_Emoji_Modifier_Sequence
1F91E 1F3FE ; RGI_Emoji_Modifier_Sequence
1F91E 1F3FF ; RGI_Emoji_Modifier_Sequence
1F91F 1F3FB ; RGI_Emoji_Modifier_Sequence
1F91F 1F3FC ; RGI_Emoji_Modifier_Sequence
1F91F 1F3FD ; RGI_Emoji_Modifier_Sequence
1F91F 1F3FE ; RGI_Emoji_Modifier_Sequence
1F91F 1F3FF ; RGI_Emoji_Modifier_Sequence
1F926 1F3FB ; RGI_Emoji_Modifier_Sequence
1F926 1F3FC ; RGI_Emoji_Modifier_Sequence
1F926 1F3FD ; RGI_Emoji_Modifier_Sequence
1F926 1F3FE ; RGI_Emoji_Modifier_Sequence
1F926 1F3FF ; RGI_Emoji_Modifier_Sequence
1F930 1F3FB ; RGI_Emoji_Modifier_Sequence
1F930 1F3FC ; RGI_Emoji_Modifier_Sequence
1F930 1F3FD ; RGI_Emoji_Modifier_Sequence
1F930 1F3FE ; RGI_Emoji_Modifier_Sequence
1F930 1F3FF ; RGI_Emoji_Modifier_Sequence
1F931 1F3FB ; RGI_Emoji_Modifier_Sequence
1F931 1F3FC ; RGI_Emoji_Modifier_Sequence
1F931 1F3FD ; RGI_Emoji_Modifier_Sequence
1F931 1F3FE ; RGI_Emoji_Modifier_Sequence
1F931 1F3FF ; RGI_Emoji_Modifier_Sequence
1F932 1F3FB ; RGI_Emoji_Modifier_Sequence
1F932 1F3FC ; RGI_Emoji_Modifier_Sequence
1F932 1F3FD ; RGI_Emoji_Modifier_Sequence
1F932 1F3FE ; RGI_Emoji_Modifier_Sequence
1F932 1F3FF ; RGI_Emoji_Modifier_Sequence
1F933 1F3FB ; RGI_Emoji_Modifier_Sequence
1F933 1F3FC ; RGI_Emoji_Modifier_Sequence
1F933 1F3FD ; RGI_Emoji_Modifier_Sequence
1F933 1F3FE ; RGI_Emoji_Modifier_Sequence
1F933 1F3FF ; RGI_Emoji_Modifier_Sequence
1F934 1F3FB ; RGI_Emoji_Modifier_Sequence
1F934 1F3FC ; RGI_Emoji_Modifier_Sequence
1F934 1F3FD ; RGI_Emoji_Modifier_Sequence
1F934 1F3FE ; RGI_Emoji_Modifier_Sequence
1F934 1F3FF ; RGI_Emoji_Modifier_Sequence
1F935 1F3FB ; RGI_Emoji_Modifier_Sequence
1F935 1F3FC ; RGI_Emoji_Modifier_Sequence
1F935 1F3FD ; RGI_Emoji_Modifier_Sequence
1F935 1F3FE ; RGI_Emoji_Modifier_Sequence
1F935 1F3FF ; RGI_Emoji_Modifier_Sequence
1F936 1F3FB ; RGI_Emoji_Modifier_Sequence
1F936 1F3FC ; RGI_Emoji_Modifier_Sequence
1F936 1F3FD ; RGI_Emoji_Modifier_Sequence
1F936 1F3FE ; RGI_Emoji_Modifier_Sequence
1F936 1F3FF ; RGI_Emoji_Modifier_Sequence
1F937 1F3FB ; RGI_Emoji_Modifier_Sequence
1F937 1F3FC ; RGI_Emoji_Modifier_Sequence
1F937 1F3FD ; RGI_Emoji_Modifier_Sequence
1F937 1F3FE ; RGI_Emoji_Modifier_Sequence
1F937 1F3FF ; RGI_Emoji_Modifier_Sequence
1F938 1F3FB ; RGI_Emoji_Modifier_Sequence
1F938 1F3FC ; RGI_Emoji_Modifier_Sequence
1F938 1F3FD ; RGI_Emoji_Modifier_Sequence
1F938 1F3FE ; RGI_Emoji_Modifier_Sequence
1F938 1F3FF ; RGI_Emoji_Modifier_Sequence
1F939 1F3FB ; RGI_Emoji_Modifier_Sequence
1F939 1F3FC ; RGI_Emoji_Modifier_Sequence
1F939 1F3FD ; RGI_Emoji_Modifier_Sequence
1F939 1F3FE ; RGI_Emoji_Modifier_Sequence
1F939 1F3FF ; RGI_Emoji_Modifier_Sequence
1F93D 1F3FB ; RGI_Emoji_Modifier_Sequence
1F93D 1F3FC ; RGI_Emoji_Modifier_Sequence
1F93D 1F3FD ; RGI_Emoji_Modifier_Sequence
1F93D 1F3FE ; RGI_Emoji_Modifier_Sequence
1F93D 1F3FF ; RGI_Emoji_Modifier_Sequence
1F93E 1F3FB ; RGI_Emoji_Modifier_Sequence
1F93E 1F3FC ; RGI_Emoji_Modifier_Sequence
1F93E 1F3FD ; RGI_Emoji_Modifier_Sequence
1F93E 1F3FE ; RGI_Emoji_Modifier_Sequence
1F93E 1F3FF ; RGI_Emoji_Modifier_Sequence
1F977 1F3FB ; RGI_Emoji_Modifier_Sequence
1F977 1F3FC ; RGI_Emoji_Modifier_Sequence
1F977 1F3FD ; RGI_Emoji_Modifier_Sequence
1F977 1F3FE ; RGI_Emoji_Modifier_Sequence
1F977 1F3FF ; RGI_Emoji_Modifier_Sequence
1F9B5 1F3FB ; RGI_Emoji_Modifier_Sequence
1F9B5 1F3FC ; RGI_Emoji_Modifier_Sequence
1F9B5 1F3FD ; RGI_Emoji_Modifier_Sequence
1F9B5 1F3FE ; RGI_Emoji_Modifier_Sequence
1F9B5 1F3FF ; RGI_Emoji_Modifier_Sequence
1F9B6 1F3FB ; RGI_Emoji_Modifier_Sequence
1F9B6 1F3FC ; RGI_Emoji_Modifier_Sequence
1F9B6 1F3FD ; RGI_Emoji_Modifier_Sequence
1F9B6 1F3FE ; RGI_Emoji_Modifier_Sequence
1F9B6 1F3FF ; RGI_Emoji_Modifier_Sequence
1F9B8 1F3FB ; RGI_Emoji_Modifier_Sequence
1F9B8 1F3FC ; RGI_Emoji_Modifier_Sequence
1F9B8 1F3FD ; RGI_Emoji_Modifier_Sequence
1F9B8 1F3FE ; RGI_Emoji_Modifier_Sequence
1F9B8 1F3FF ; RGI_Emoji_Modifier_Sequence
1F9B9 1F3FB ; RGI_Emoji_Modifier_Sequence
1F9B9 1F3FC ; RGI_Emoji_Modifier_Sequence
1F9B9 1F3FD ; RGI_Emoji_Modifier_Sequence
1F9B9 1F3FE ; RGI_Emoji_Modifier_Sequence
1F9B9 1F3FF ; RGI_Emoji_Modifier_Sequence
1F9BB 1F3FB ; RGI_Emoji_Modifier_Sequence
1F9BB 1F3FC ; RGI_Emoji_Modifier_Sequence
1F9BB 1F3FD ; RGI_Emoji_Modifier_Sequence
1F9BB 1F3FE ; RGI_Emoji_Modifier_Sequence
1F9BB 1F3FF ; RGI_Emoji_Modifier_Sequence
1F9CD 1F3FB ; RGI_Emoji_Modifier_Sequence
1F9CD 1F3FC ; RGI_Emoji_Modifier_Sequence
1F9CD 1F3FD ; RGI_Emoji_Modifier_Sequence
1F9CD 1F3FE ; RGI_Emoji_Modifier_Sequence
1F9CD 1F3FF ; RGI_Emoji_Modifier_Sequence
1F9CE 1F3FB ; RGI_Emoji_Modifier_Sequence
1F9CE 1F3FC ; RGI_Emoji_Modifier_Sequence
1F9CE 1F3FD ; RGI_Emoji_Modifier_Sequence
1F9CE 1F3FE ; RGI_Emoji_Modifier_Sequence
1F9CE 1F3FF ; RGI_Emoji_Modifier_Sequence
1F9CF 1F3FB ; RGI_Emoji_Modifier_Sequence
1F9CF 1F3FC ; RGI_Emoji_Modifier_Sequence
1F9CF 1F3FD ; RGI_Emoji_Modifier_Sequence
1F9CF 1F3FE ; RGI_Emoji_Modifier_Sequence
1F9CF 1F3FF ; RGI_Emoji_Modifier_Sequence
1F9D1 1F3FB ; RGI_Emoji_Modifier_Sequence
1F9D1 1F3FC ; RGI_Emoji_Modifier_Sequence
1F9D1 1F3FD ; RGI_Emoji_Modifier_Sequence
1F9D1 1F3FE ; RGI_Emoji_Modifier_Sequence
1F9D1 1F3FF ; RGI_Emoji_Modifier_Sequence
1F9D2 1F3FB ; RGI_Emoji_Modifier_Sequence
1F9D2 1F3FC ; RGI_Emoji_Modifier_Sequence
1F9D2 1F3FD ; RGI_Emoji_Modifier_Sequence
1F9D2 1F3FE ; RGI_Emoji_Modifier_Sequence
1F9D2 1F3FF ; RGI_Emoji_Modifier_Sequence
1F9D3 1F3FB ; RGI_Emoji_Modifier_Sequence
1F9D3 1F3FC ; RGI_Emoji_Modifier_Sequence
1F9D3 1F3FD ; RGI_Emoji_Modifier_Sequence
1F9D3 1F3FE ; RGI_Emoji_Modifier_Sequence
1F9D3 1F3FF ; RGI_Emoji_Modifier_Sequence
1F9D4 1F3FB ; RGI_Emoji_Modifier_Sequence
1F9D4 1F3FC ; RGI_Emoji_Modifier_Sequence
1F9D4 1F3FD ; RGI_Emoji_Modifier_Sequence
1F9D4 1F3FE ; RGI_Emoji_Modifier_Sequence
1F9D4 1F3FF ; RGI_Emoji_Modifier_Sequence
1F9D5 1F3FB ; RGI_Emoji_Modifier_Sequence
1F9D5 1F3FC ; RGI_Emoji_Modifier_Sequence
1F9D5 1F3FD ; RGI_Emoji_Modifier_Sequence
1F9D5 1F3FE ; RGI_Emoji_Modifier_Sequence
1F9D5 1F3FF ; RGI_Emoji_Modifier_Sequence
1F9D6 1F3FB ; RGI_Emoji_Modifier_Sequence
1F9D6 1F3FC ; RGI_Emoji_Modifier_Sequence
1F9D6 1F3FD ; RGI_Emoji_Modifier_Sequence
1F9D6 1F3FE ; RGI_Emoji_Modifier_Sequence
1F9D6 1F3FF ; RGI_Emoji_Modifier_Sequence
1F9D7 1F3FB ; RGI_Emoji_Modifier_Sequence
1F9D7 1F3FC ; RGI_Emoji_Modifier_Sequence
1F9D7 1F3FD ; RGI_Emoji_Modifier_Sequence
1F9D7 1F3FE ; RGI_Emoji_Modifier_Sequence
1F9D7 1F3FF ; RGI_Emoji_Modifier_Sequence
1F9D8 1F3FB ; RGI_Emoji_Modifier_Sequence
1F9D8 1F3FC ; RGI_Emoji_Modifier_Sequence
1F9D8 1F3FD ; RGI_Emoji_Modifier_Sequence
1F9D8 1F3FE ; RGI_Emoji_Modifier_Sequence
1F9D8 1F3FF ; RGI_Emoji_Modifier_Sequence
1F9D9 1F3FB ; RGI_Emoji_Modifier_Sequence
1F9D9 1F3FC ; RGI_Emoji_Modifier_Sequence
1F9D9 1F3FD ; RGI_Emoji_Modifier_Sequence
1F9D9 1F3FE ; RGI_Emoji_Modifier_Sequence
1F9D9 1F3FF ; RGI_Emoji_Modifier_Sequence
1F9DA 1F3FB ; RGI_Emoji_Modifier_Sequence
1F9DA 1F3FC ; RGI_Emoji_Modifier_Sequence
1F9DA 1F3FD ; RGI_Emoji_Modifier_Sequence
1F9DA 1F3FE ; RGI_Emoji_Modifier_Sequence
1F9DA 1F3FF ; RGI_Emoji_Modifier_Sequence
1F9DB 1F3FB ; RGI_Emoji_Modifier_Sequence
1F9DB 1F3FC ; RGI_Emoji_Modifier_Sequence
1F9DB 1F3FD ; RGI_Emoji_Modifier_Sequence
1F9DB 1F3FE ; RGI_Emoji_Modifier_Sequence
1F9DB 1F3FF ; RGI_Emoji_Modifier_Sequence
1F9DC 1F3FB ; RGI_Emoji_Modifier_Sequence
1F9DC 1F3FC ; RGI_Emoji_Modifier_Sequence
1F9DC 1F3FD ; RGI_Emoji_Modifier_Sequence
1F9DC 1F3FE ; RGI_Emoji_Modifier_Sequence
1F9DC 1F3FF ; RGI_Emoji_Modifier_Sequence
1F9DD 1F3FB ; RGI_Emoji_Modifier_Sequence
1F9DD 1F3FC ; RGI_Emoji_Modifier_Sequence
1F9DD 1F3FD ; RGI_Emoji_Modifier_Sequence
1F9DD 1F3FE ; RGI_Emoji_Modifier_Sequence
1F9DD 1F3FF ; RGI_Emoji_Modifier_Sequence
1FAC3 1F3FB ; RGI_Emoji_Modifier_Sequence
1FAC3 1F3FC ; RGI_Emoji_Modifier_Sequence
1FAC3 1F3FD ; RGI_Emoji_Modifier_Sequence
1FAC3 1F3FE ; RGI_Emoji_Modifier_Sequence
1FAC3 1F3FF ; RGI_Emoji_Modifier_Sequence
1FAC4 1F3FB ; RGI_Emoji_Modifier_Sequence
1FAC4 1F3FC ; RGI_Emoji_Modifier_Sequence
1FAC4 1F3FD ; RGI_Emoji_Modifier_Sequence
1FAC4 1F3FE ; RGI_Emoji_Modifier_Sequence
1FAC4 1F3FF ; RGI_Emoji_Modifier_Sequence
1FAC5 1F3FB ; RGI_Emoji_Modifier_Sequence
1FAC5 1F3FC ; RGI_Emoji_Modifier_Sequence
1FAC5 1F3FD ; RGI_Emoji_Modifier_Sequence
1FAC5 1F3FE ; RGI_Emoji_Modifier_Sequence
1FAC5 1F3FF ; RGI_Emoji_Modifier_Sequence
1FAF0 1F3FB ; RGI_Emoji_Modifier_Sequence
1FAF0 1F3FC ; RGI_Emoji_Modifier_Sequence
1FAF0 1F3FD ; RGI_Emoji_Modifier_Sequence
1FAF0 1F3FE ; RGI_Emoji_Modifier_Sequence
1FAF0 1F3FF ; RGI_Emoji_Modifier_Sequence
1FAF1 1F3FB ; RGI_Emoji_Modifier_Sequence
1FAF1 1F3FC ; RGI_Emoji_Modifier_Sequence
1FAF1 1F3FD ; RGI_Emoji_Modifier_Sequence
1FAF1 1F3FE ; RGI_Emoji_Modifier_Sequence
1FAF1 1F3FF ; RGI_Emoji_Modifier_Sequence
1FAF2 1F3FB ; RGI_Emoji_Modifier_Sequence
1FAF2 1F3FC ; RGI_Emoji_Modifier_Sequence
1FAF2 1F3FD ; RGI_Emoji_Modifier_Sequence
1FAF2 1F3FE ; RGI_Emoji_Modifier_Sequence
1FAF2 1F3FF ; RGI_Emoji_Modifier_Sequence
1FAF3 1F3FB ; RGI_Emoji_Modifier_Sequence
1FAF3 1F3FC ; RGI_Emoji_Modifier_Sequence
1FAF3 1F3FD ; RGI_Emoji_Modifier_Sequence
1FAF3 1F3FE ; RGI_Emoji_Modifier_Sequence
1FAF3 1F3FF ; RGI_Emoji_Modifier_Sequence
1FAF4 1F3FB ; RGI_Emoji_Modifier_Sequence
1FAF4 1F3FC ; RGI_Emoji_Modifier_Sequence
1FAF4 1F3FD ; RGI_Emoji_Modifier_Sequence
1FAF4 1F3FE ; RGI_Emoji_Modifier_Sequence
1FAF4 1F3FF ; RGI_Emoji_Modifier_Sequence
1FAF5 1F3FB ; RGI_Emoji_Modifier_Sequence
1FAF5 1F3FC ; RGI_Emoji_Modifier_Sequence
1FAF5 1F3FD ; RGI_Emoji_Modifier_Sequence
1FAF5 1F3FE ; RGI_Emoji_Modifier_Sequence
1FAF5 1F3FF ; RGI_Emoji_Modifier_Sequence
1FAF6 1F3FB ; RGI_Emoji_Modifier_Sequence
1FAF6 1F3FC ; RGI_Emoji_Modifier_Sequence
1FAF6 1F3FD ; RGI_Emoji_Modifier_Sequence
1FAF6 1F3FE ; RGI_Emoji_Modifier_Sequence
1FAF6 1F3FF ; RGI_Emoji_Modifier_Sequence
1FAF7 1F3FB ; RGI_Emoji_Modifier_Sequence
1FAF7 1F3FC ; RGI_Emoji_Modifier_Sequence
1FAF7 1F3FD ; RGI_Emoji_Modifier_Sequence
1FAF7 1F3FE ; RGI_Emoji_Modifier_Sequence
1FAF7 1F3FF ; RGI_Emoji_Modifier_Sequence
1FAF8 1F3FB ; RGI_Emoji_Modifier_Sequence
1FAF8 1F3FC ; RGI_Emoji_Modifier_Sequence
1FAF8 1F3FD ; RGI_Emoji_Modifier_Sequence
1FAF8 1F3FE ; RGI_Emoji_Modifier_Sequence
1FAF8 1F3FF ; RGI_Emoji_Modifier_Sequence

# Basic_Emoji (text default, emoji presentation selector)
00A9 FE0F ; Basic_Emoji
00AE FE0F ; Basic_Emoji
203C FE0F ; Basic_Emoji
2049 FE0F ; Basic_Emoji
2122 FE0F ; Basic_Emoji
2139 FE0F ; Basic_Emoji
2194 FE0F ; Basic_Emoji
2195 FE0F ; Basic_Emoji
2196 FE0F ; Basic_Emoji
2197 FE0F ; Basic_Emoji
2198 FE0F ; Basic_Emoji
2199 FE0F ; Basic_Emoji
21A9 FE0F ; Basic_Emoji
21AA FE0F ; Basic_Emoji
2328 FE0F ; Basic_Emoji
23CF FE0F ; Basic_Emoji
23ED FE0F ; Basic_Emoji
23EE FE0F ; Basic_Emoji
23EF FE0F ; Basic_Emoji
23F1 FE0F ; Basic_Emoji
23F2 FE0F ; Basic_Emoji
23F8 FE0F ; Basic_Emoji
23F9 FE0F ; Basic_Emoji
23FA FE0F ; Basic_Emoji
24C2 FE0F ; Basic_Emoji
25AA FE0F ; Basic_Emoji
25AB FE0F ; Basic_Emoji
25B6 FE0F ; Basic_Emoji
25C0 FE0F ; Basic_Emoji
25FB FE0F ; Basic_Emoji
25FC FE0F ; Basic_Emoji
2600 FE0F ; Basic_Emoji
2601 FE0F ; Basic_Emoji
2602 FE0F ; Basic_Emoji
2603 FE0F ; Basic_Emoji
2604 FE0F ; Basic_Emoji
260E FE0F ; Basic_Emoji
2611 FE0F ; Basic_Emoji
2618 FE0F ; Basic_Emoji
261D FE0F ; Basic_Emoji
2620 FE0F ; Basic_Emoji
2622 FE0F ; Basic_Emoji
2623 FE0F ; Basic_Emoji
2626 FE0F ; Basic_Emoji
262A FE0F ; Basic_Emoji
262E FE0F ; Basic_Emoji
262F FE0F ; Basic_Emoji
2638 FE0F ; Basic_Emoji
2639 FE0F ; Basic_Emoji
263A FE0F ; Basic_Emoji
2640 FE0F ; Basic_Emoji
2642 FE0F ; Basic_Emoji
265F FE0F ; Basic_Emoji
2660 FE0F ; Basic_Emoji
2663 FE0F ; Basic_Emoji
2665 FE0F ; Basic_Emoji
2666 FE0F ; Basic_Emoji
2668 FE0F ; Basic_Emoji
267B FE0F ; Basic_Emoji
267E FE0F ; Basic_Emoji
2692 FE0F ; Basic_Emoji
2694 FE0F ; Basic_Emoji
2695 FE0F ; Basic_Emoji
2696 FE0F ; Basic_Emoji
2697 FE0F ; Basic_Emoji
2699 FE0F ; Basic_Emoji
269B FE0F ; Basic_Emoji
269C FE0F ; Basic_Emoji
26A0 FE0F ; Basic_Emoji
26A7 FE0F ; Basic_Emoji
26B0 FE0F ; Basic_Emoji
26B1 FE0F ; Basic_Emoji
26C8 FE0F ; Basic_Emoji
26CF FE0F ; Basic_Emoji
26D1 FE0F ; Basic_Emoji
26D3 FE0F ; Basic_Emoji
26E9 FE0F ; Basic_Emoji
26F0 FE0F ; Basic_Emoji
26F1 FE0F ; Basic_Emoji
26F4 FE0F ; Basic_Emoji
26F7 FE0F ; Basic_Emoji
26F8 FE0F ; Basic_Emoji
26F9 FE0F ; Basic_Emoji
2702 FE0F ; Basic_Emoji
2708 FE0F ; Basic_Emoji
2709 FE0F ; Basic_Emoji
270C FE0F ; Basic_Emoji
270D FE0F ; Basic_Emoji
270F FE0F ; Basic_Emoji
2712 FE0F ; Basic_Emoji
2714 FE0F ; Basic_Emoji
2716 FE0F ; Basic_Emoji
271D FE0F ; Basic_Emoji
2721 FE0F ; Basic_Emoji
2733 FE0F ; Basic_Emoji
2734 FE0F ; Basic_Emoji
2744 FE0F ; Basic_Emoji
2747 FE0F ; Basic_Emoji
2763 FE0F ; Basic_Emoji
2764 FE0F ; Basic_Emoji
27A1 FE0F ; Basic_Emoji
2934 FE0F ; Basic_Emoji
2935 FE0F ; Basic_Emoji
2B05 FE0F ; Basic_Emoji
2B06 FE0F ; Basic_Emoji
2B07 FE0F ; Basic_Emoji
3030 FE0F ; Basic_Emoji
303D FE0F ; Basic_Emoji
3297 FE0F ; Basic_Emoji
3299 FE0F ; Basic_Emoji
1F170 FE0F ; Basic_Emoji
1F171 FE0F ; Basic_Emoji
1F17E FE0F ; Basic_Emoji
1F17F FE0F ; Basic_Emoji
1F202 FE0F ; Basic_Emoji
1F237 FE0F ; Basic_Emoji
1F321 FE0F ; Basic_Emoji
1F324 FE0F ; Basic_Emoji
1F325 FE0F ; Basic_Emoji
1F326 FE0F ; Basic_Emoji
1F327 FE0F ; Basic_Emoji
1F328 FE0F ; Basic_Emoji
1F329 FE0F ; Basic_Emoji
1F32A FE0F ; Basic_Emoji
1F32B FE0F ; Basic_Emoji
1F32C FE0F ; Basic_Emoji
1F336 FE0F ; Basic_Emoji
1F37D FE0F ; Basic_Emoji
1F396 FE0F ; Basic_Emoji
1F397 FE0F ; Basic_Emoji
1F399 FE0F ; Basic_Emoji
1F39A FE0F ; Basic_Emoji
1F39B FE0F ; Basic_Emoji
1F39E FE0F ; Basic_Emoji
1F39F FE0F ; Basic_Emoji
1F3CB FE0F ; Basic_Emoji
1F3CC FE0F ; Basic_Emoji
1F3CD FE0F ; Basic_Emoji
1F3CE FE0F ; Basic_Emoji
1F3D4 FE0F ; Basic_Emoji
1F3D5 FE0F ; Basic_Emoji
1F3D6 FE0F ; Basic_Emoji
1F3D7 FE0F ; Basic_Emoji
1F3D8 FE0F ; Basic_Emoji
1F3D9 FE0F ; Basic_Emoji
1F3DA FE0F ; Basic_Emoji
1F3DB FE0F ; Basic_Emoji
1F3DC FE0F ; Basic_Emoji
1F3DD FE0F ; Basic_Emoji
1F3DE FE0F ; Basic_Emoji
1F3DF FE0F ; Basic_Emoji
1F3F3 FE0F ; Basic_Emoji
1F3F5 FE0F ; Basic_Emoji
1F3F7 FE0F ; Basic_Emoji
1F43F FE0F ; Basic_Emoji
1F441 FE0F ; Basic_Emoji
1F4FD FE0F ; Basic_Emoji
1F549 FE0F ; Basic_Emoji
1F54A FE0F ; Basic_Emoji
1F56F FE0F ; Basic_Emoji
1F570 FE0F ; Basic_Emoji
1F573 FE0F ; Basic_Emoji
1F574 FE0F ; Basic_Emoji
1F575 FE0F ; Basic_Emoji
1F576 FE0F ; Basic_Emoji
1F577 FE0F ; Basic_Emoji
1F578 FE0F ; Basic_Emoji
1F579 FE0F ; Basic_Emoji
1F587 FE0F ; Basic_Emoji
1F58A FE0F ; Basic_Emoji
1F58B FE0F ; Basic_Emoji
1F58C FE0F ; Basic_Emoji
1F58D FE0F ; Basic_Emoji
1F590 FE0F ; Basic_Emoji
1F5A5 FE0F ; Basic_Emoji
1F5A8 FE0F ; Basic_Emoji
1F5B1 FE0F ; Basic_Emoji
1F5B2 FE0F ; Basic_Emoji
1F5BC FE0F ; Basic_Emoji
1F5C2 FE0F ; Basic_Emoji
1F5C3 FE0F ; Basic_Emoji
1F5C4 FE0F ; Basic_Emoji
1F5D1 FE0F ; Basic_Emoji
1F5D2 FE0F ; Basic_Emoji
1F5D3 FE0F ; Basic_Emoji
1F5DC FE0F ; Basic_Emoji
1F5DD FE0F ; Basic_Emoji
1F5DE FE0F ; Basic_Emoji
1F5E1 FE0F ; Basic_Emoji
1F5E3 FE0F ; Basic_Emoji
1F5E8 FE0F ; Basic_Emoji
1F5EF FE0F ; Basic_Emoji
1F5F3 FE0F ; Basic_Emoji
1F5FA FE0F ; Basic_Emoji
1F6CB FE0F ; Basic_Emoji
1F6CD FE0F ; Basic_Emoji
1F6CE FE0F ; Basic_Emoji
1F6CF FE0F ; Basic_Emoji
1F6E0 FE0F ; Basic_Emoji
1F6E1 FE0F ; Basic_Emoji
1F6E2 FE0F ; Basic_Emoji
1F6E3 FE0F ; Basic_Emoji
1F6E4 FE0F ; Basic_Emoji
1F6E5 FE0F ; Basic_Emoji
1F6E9 FE0F ; Basic_Emoji
1F6F0 FE0F ; Basic_Emoji
1F6F3 FE0F ; Basic_Emoji

# Basic_Emoji (emoji presentation default)
231A..231B ; Basic_Emoji
23E9..23EC ; Basic_Emoji
23F0 ; Basic_Emoji
23F3 ; Basic_Emoji
25FD..25FE ; Basic_Emoji
2614..2615 ; Basic_Emoji
2648..2653 ; Basic_Emoji
267F ; Basic_Emoji
2693 ; Basic_Emoji
26A1 ; Basic_Emoji
26AA..26AB ; Basic_Emoji
26BD..26BE ; Basic_Emoji
26C4..26C5 ; Basic_Emoji
26CE ; Basic_Emoji
26D4 ; Basic_Emoji
26EA ; Basic_Emoji
26F2..26F3 ; Basic_Emoji
26F5 ; Basic_Emoji
26FA ; Basic_Emoji
26FD ; Basic_Emoji
2705 ; Basic_Emoji
270A..270B ; Basic_Emoji
2728 ; Basic_Emoji
274C ; Basic_Emoji
274E ; Basic_Emoji
2753..2755 ; Basic_Emoji
2757 ; Basic_Emoji
2795..2797 ; Basic_Emoji
27B0 ; Basic_Emoji
27BF ; Basic_Emoji
2B1B..2B1C ; Basic_Emoji
2B50 ; Basic_Emoji
2B55 ; Basic_Emoji
1F004 ; Basic_Emoji
1F0CF ; Basic_Emoji
1F18E ; Basic_Emoji
1F191..1F19A ; Basic_Emoji
1F201 ; Basic_Emoji
1F21A ; Basic_Emoji
1F22F ; Basic_Emoji
1F232..1F236 ; Basic_Emoji
1F238..1F23A ; Basic_Emoji
1F250..1F251 ; Basic_Emoji
1F300..1F320 ; Basic_Emoji
1F32D..1F335 ; Basic_Emoji
1F337..1F37C ; Basic_Emoji
1F37E..1F393 ; Basic_Emoji
1F3A0..1F3CA ; Basic_Emoji
1F3CF..1F3D3 ; Basic_Emoji
1F3E0..1F3F0 ; Basic_Emoji
1F3F4 ; Basic_Emoji
1F3F8..1F3FA ; Basic_Emoji
1F400..1F43E ; Basic_Emoji
1F440 ; Basic_Emoji
1F442..1F4FC ; Basic_Emoji
1F4FF..1F53D ; Basic_Emoji
1F54B..1F54E ; Basic_Emoji
1F550..1F567 ; Basic_Emoji
1F57A ; Basic_Emoji
1F595..1F596 ; Basic_Emoji
1F5A4 ; Basic_Emoji
1F5FB..1F64F ; Basic_Emoji
1F680..1F6C5 ; Basic_Emoji
1F6CC ; Basic_Emoji
1F6D0..1F6D2 ; Basic_Emoji
1F6D5..1F6D7 ; Basic_Emoji
1F6DC..1F6DF ; Basic_Emoji
1F6EB..1F6EC ; Basic_Emoji
1F6F4..1F6FC ; Basic_Emoji
1F7E0..1F7EB ; Basic_Emoji
1F7F0 ; Basic_Emoji
1F90C..1F93A ; Basic_Emoji
1F93C..1F945 ; Basic_Emoji
1F947..1F9FF ; Basic_Emoji
1FA70..1FA7C ; Basic_Emoji
1FA80..1FA88 ; Basic_Emoji
1FA90..1FABD ; Basic_Emoji
1FABF..1FAC5 ; Basic_Emoji
1FACE..1FADB ; Basic_Emoji
1FAE0..1FAE8 ; Basic_Emoji
1FAF0..1FAF8 ; Basic_Emoji
"""
