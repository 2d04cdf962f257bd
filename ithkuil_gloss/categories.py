"""
Grammatical categories for ithkuil_gloss.

Each category is an Enum whose members carry an abbreviation, a full name
and a default flag. Members render through the Glossable interface:
abbreviations at precision 0 and 1, full names from precision 2 on, and
nothing at all when they are the category default and defaults are ignored.

Member order is significant: ``by_form`` and ``by_vowel`` index into it.
"""

from enum import Enum
from typing import Optional

from ithkuil_gloss.glosses import Glossable
from ithkuil_gloss.phonology import series_and_form


class Category(Glossable, Enum):
    """Base class of every grammatical category enum."""

    def __init__(self, abbreviation: str, full_name: str, is_default: bool = False):
        self.abbreviation = abbreviation
        self.full_name = full_name
        self.is_default = is_default

    def to_string(self, precision: int = 1, ignore_default: bool = True) -> str:
        if ignore_default and self.is_default:
            return ""
        return self.full_name if precision >= 2 else self.abbreviation

    @classmethod
    def by_form(cls, form: int):
        """Member at 1-based position ``form``, or None."""
        members = list(cls)
        if 1 <= form <= len(members):
            return members[form - 1]
        return None

    @classmethod
    def by_abbreviation(cls, abbreviation: str):
        for member in cls:
            if member.abbreviation == abbreviation:
                return member
        return None

    def __repr__(self) -> str:
        return f"<{type(self).__name__}.{self.name}: {self.abbreviation}>"


# ============================================================================
# Formative Slots II-IV
# ============================================================================

class Stem(Category):
    STEM_ZERO = ("S0", "stem zero")
    STEM_ONE = ("S1", "stem one")
    STEM_TWO = ("S2", "stem two")
    STEM_THREE = ("S3", "stem three")

    @property
    def number(self) -> int:
        return list(Stem).index(self)


class Version(Category):
    PROCESSUAL = ("PRC", "processual", True)
    COMPLETIVE = ("CPT", "completive")


class Function(Category):
    STATIVE = ("STA", "stative", True)
    DYNAMIC = ("DYN", "dynamic")


class Specification(Category):
    BASIC = ("BSC", "basic", True)
    CONTENTIAL = ("CTE", "contential")
    CONSTITUTIVE = ("CSV", "constitutive")
    OBJECTIVE = ("OBJ", "objective")


class Context(Category):
    EXISTENTIAL = ("EXS", "existential", True)
    FUNCTIONAL = ("FNC", "functional")
    REPRESENTATIONAL = ("RPS", "representational")
    AMALGAMATIVE = ("AMG", "amalgamative")


class Concatenation(Category):
    TYPE_ONE = ("T1", "type one", True)
    TYPE_TWO = ("T2", "type two")


# ============================================================================
# Ca Complex
# ============================================================================

class Configuration(Category):
    UNIPLEX = ("UNI", "uniplex", True)
    MULTIPLEX_SIMILAR_SEPARATE = ("MSS", "multiplex similar separate")
    MULTIPLEX_SIMILAR_CONNECTED = ("MSC", "multiplex similar connected")
    MULTIPLEX_SIMILAR_FUSED = ("MSF", "multiplex similar fused")
    MULTIPLEX_DISSIMILAR_SEPARATE = ("MDS", "multiplex dissimilar separate")
    MULTIPLEX_DISSIMILAR_CONNECTED = ("MDC", "multiplex dissimilar connected")
    MULTIPLEX_DISSIMILAR_FUSED = ("MDF", "multiplex dissimilar fused")
    MULTIPLEX_FUZZY_SEPARATE = ("MFS", "multiplex fuzzy separate")
    MULTIPLEX_FUZZY_CONNECTED = ("MFC", "multiplex fuzzy connected")
    MULTIPLEX_FUZZY_FUSED = ("MFF", "multiplex fuzzy fused")
    DUPLEX_SIMILAR_SEPARATE = ("DSS", "duplex similar separate")
    DUPLEX_SIMILAR_CONNECTED = ("DSC", "duplex similar connected")
    DUPLEX_SIMILAR_FUSED = ("DSF", "duplex similar fused")
    DUPLEX_DISSIMILAR_SEPARATE = ("DDS", "duplex dissimilar separate")
    DUPLEX_DISSIMILAR_CONNECTED = ("DDC", "duplex dissimilar connected")
    DUPLEX_DISSIMILAR_FUSED = ("DDF", "duplex dissimilar fused")
    DUPLEX_FUZZY_SEPARATE = ("DFS", "duplex fuzzy separate")
    DUPLEX_FUZZY_CONNECTED = ("DFC", "duplex fuzzy connected")
    DUPLEX_FUZZY_FUSED = ("DFF", "duplex fuzzy fused")


class Extension(Category):
    DELIMITIVE = ("DEL", "delimitive", True)
    PROXIMAL = ("PRX", "proximal")
    INCIPIENT = ("ICP", "incipient")
    ATTENUATIVE = ("ATV", "attenuative")
    GRADUATIVE = ("GRA", "graduative")
    DEPLETIVE = ("DPL", "depletive")


class Affiliation(Category):
    CONSOLIDATIVE = ("CSL", "consolidative", True)
    ASSOCIATIVE = ("ASO", "associative")
    COALESCENT = ("COA", "coalescent")
    VARIATIVE = ("VAR", "variative")


class Perspective(Category):
    MONADIC = ("M", "monadic", True)
    POLYADIC = ("P", "polyadic")
    NOMIC = ("N", "nomic")
    ABSTRACT = ("A", "abstract")


class Essence(Category):
    NORMAL = ("NRM", "normal", True)
    REPRESENTATIVE = ("RPV", "representative")


# ============================================================================
# Slot VIII: Vn
# ============================================================================

class Valence(Category):
    MONOACTIVE = ("MNO", "monoactive", True)
    PARALLEL = ("PRL", "parallel")
    COROLLARY = ("CRO", "corollary")
    RECIPROCAL = ("RCP", "reciprocal")
    COMPLEMENTARY = ("CPL", "complementary")
    DUPLICATIVE = ("DUP", "duplicative")
    DEMONSTRATIVE = ("DEM", "demonstrative")
    CONTINGENT = ("CNG", "contingent")
    PARTICIPATIVE = ("PTI", "participative")


class Phase(Category):
    CONTEXTUAL = ("CTX", "contextual")
    PUNCTUAL = ("PCT", "punctual")
    ITERATIVE = ("ITR", "iterative")
    REPETITIVE = ("REP", "repetitive")
    INTERMITTENT = ("ITM", "intermittent")
    RECURRENT = ("RCT", "recurrent")
    FREQUENTATIVE = ("FRE", "frequentative")
    FRAGMENTATIVE = ("FRG", "fragmentative")
    FLUCTUATIVE = ("FLC", "fluctuative")


class EffectAndPerson(Category):
    BENEFICIAL_FIRST = ("1:BEN", "beneficial to speaker")
    BENEFICIAL_SECOND = ("2:BEN", "beneficial to addressee")
    BENEFICIAL_THIRD = ("3:BEN", "beneficial to third party")
    BENEFICIAL_SELF = ("SLF:BEN", "beneficial to self")
    UNKNOWN = ("UNK", "unknown benefit")
    DETRIMENTAL_SELF = ("SLF:DET", "detrimental to self")
    DETRIMENTAL_THIRD = ("3:DET", "detrimental to third party")
    DETRIMENTAL_SECOND = ("2:DET", "detrimental to addressee")
    DETRIMENTAL_FIRST = ("1:DET", "detrimental to speaker")


class Level(Category):
    MINIMAL = ("MIN", "minimal")
    SUBEQUATIVE = ("SBE", "subequative")
    INFERIOR = ("IFR", "inferior")
    DEFICIENT = ("DFC", "deficient")
    EQUATIVE = ("EQU", "equative")
    SURPASSIVE = ("SUR", "surpassive")
    SUPERLATIVE = ("SPL", "superlative")
    SUPEREQUATIVE = ("SPQ", "superequative")
    MAXIMAL = ("MAX", "maximal")


class Aspect(Category):
    RETROSPECTIVE = ("RTR", "retrospective")
    PROSPECTIVE = ("PRS", "prospective")
    HABITUAL = ("HAB", "habitual")
    PROGRESSIVE = ("PRG", "progressive")
    IMMINENT = ("IMM", "imminent")
    PRECESSIVE = ("PCS", "precessive")
    REGULATIVE = ("REG", "regulative")
    SUMMATIVE = ("SMM", "summative")
    ANTICIPATORY = ("ATP", "anticipatory")

    RESUMPTIVE = ("RSM", "resumptive")
    CESSATIVE = ("CSS", "cessative")
    PAUSAL = ("PAU", "pausal")
    REGRESSIVE = ("RGR", "regressive")
    PRECLUSIVE = ("PCL", "preclusive")
    CONTINUATIVE = ("CNT", "continuative")
    INCESSATIVE = ("ICS", "incessative")
    EXPERIENTIAL = ("EXP", "experiential")
    INTERRUPTIVE = ("IRP", "interruptive")

    PREEMPTIVE = ("PMP", "preemptive")
    CLIMACTIC = ("CLM", "climactic")
    DILATORY = ("DLT", "dilatory")
    TEMPORARY = ("TMP", "temporary")
    EXPENDITIVE = ("XPD", "expenditive")
    LIMITATIVE = ("LIM", "limitative")
    EXPEDITIVE = ("EPD", "expeditive")
    PROTRACTIVE = ("PTC", "protractive")
    PREPARATORY = ("PPR", "preparatory")

    DISCLUSIVE = ("DCL", "disclusive")
    CONCLUSIVE = ("CCL", "conclusive")
    CULMINATIVE = ("CUL", "culminative")
    INTERMEDIATIVE = ("IMD", "intermediative")
    TARDATIVE = ("TRD", "tardative")
    TRANSITIONAL = ("TNS", "transitional")
    INTERCOMMUTATIVE = ("ITC", "intercommutative")
    MOTIVE = ("MTV", "motive")
    SEQUENTIAL = ("SQN", "sequential")

    @classmethod
    def by_vowel(cls, vowel: str) -> Optional["Aspect"]:
        """Aspect spelled by a pattern-two Vn (series 1-4 only)."""
        series, form = series_and_form(vowel)
        if not 1 <= series <= 4:
            return None
        return list(cls)[9 * (series - 1) + form - 1]


# ============================================================================
# Slot VIII: Cn
# ============================================================================

class Mood(Category):
    FACTUAL = ("FAC", "factual", True)
    SUBJUNCTIVE = ("SUB", "subjunctive")
    ASSUMPTIVE = ("ASM", "assumptive")
    SPECULATIVE = ("SPC", "speculative")
    COUNTERFACTIVE = ("COU", "counterfactive")
    HYPOTHETICAL = ("HYP", "hypothetical")


class CaseScope(Category):
    NATURAL = ("CCN", "natural", True)
    ANTECEDENT = ("CCA", "antecedent")
    SUBALTERN = ("CCS", "subaltern")
    QUALIFIER = ("CCQ", "qualifier")
    PRECEDENT = ("CCP", "precedent")
    SUCCESSIVE = ("CCV", "successive")


# ============================================================================
# Slot IX: Vc / Vk
# ============================================================================

class Case(Category):
    # Transrelative
    THEMATIC = ("THM", "thematic", True)
    INSTRUMENTAL = ("INS", "instrumental")
    ABSOLUTIVE = ("ABS", "absolutive")
    STIMULATIVE = ("STM", "stimulative")
    AFFECTIVE = ("AFF", "affective")
    EFFECTUATIVE = ("EFF", "effectuative")
    ERGATIVE = ("ERG", "ergative")
    DATIVE = ("DAT", "dative")
    INDUCIVE = ("IND", "inducive")

    # Appositive
    POSSESSIVE = ("POS", "possessive")
    PROPRIETIVE = ("PRP", "proprietive")
    GENITIVE = ("GEN", "genitive")
    ATTRIBUTIVE = ("ATT", "attributive")
    PRODUCTIVE = ("PDC", "productive")
    INTERPRETATIVE = ("ITP", "interpretative")
    ORIGINATIVE = ("OGN", "originative")
    INTERDEPENDENT = ("IDP", "interdependent")
    PARTITIVE = ("PAR", "partitive")

    # Associative
    APPLICATIVE = ("APL", "applicative")
    PURPOSIVE = ("PUR", "purposive")
    TRANSMISSIVE = ("TRA", "transmissive")
    DEFERENTIAL = ("DFR", "deferential")
    CONTRASTIVE = ("CRS", "contrastive")
    TRANSPOSITIVE = ("TSP", "transpositive")
    COMMUTATIVE = ("CMM", "commutative")
    COMPARATIVE = ("CMP", "comparative")
    CONSIDERATIVE = ("CSD", "considerative")

    # Adverbial
    FUNCTIVE = ("FUN", "functive")
    TRANSFORMATIVE = ("TFM", "transformative")
    CLASSIFICATIVE = ("CLA", "classificative")
    RESULTATIVE = ("RSL", "resultative")
    CONSUMPTIVE = ("CSM", "consumptive")
    CONCESSIVE = ("CON", "concessive")
    AVERSIVE = ("AVR", "aversive")
    CONVERSIVE = ("CVS", "conversive")
    SITUATIVE = ("SIT", "situative")

    # Relational
    PERTINENTIAL = ("PRN", "pertinential")
    DESCRIPTIVE = ("DSP", "descriptive")
    CORRELATIVE = ("COR", "correlative")
    COMPOSITIVE = ("CPS", "compositive")
    COMITATIVE = ("COM", "comitative")
    UTILITATIVE = ("UTL", "utilitative")
    PREDICATIVE = ("PRD", "predicative")
    RELATIVE = ("RLT", "relative")

    # Affinitive
    ACTIVATIVE = ("ACT", "activative")
    ASSIMILATIVE = ("ASI", "assimilative")
    ESSIVE = ("ESS", "essive")
    TERMINATIVE = ("TRM", "terminative")
    SELECTIVE = ("SEL", "selective")
    CONFORMATIVE = ("CFM", "conformative")
    DEPENDENT = ("DEP", "dependent")
    VOCATIVE = ("VOC", "vocative")

    # Spatio-temporal I
    LOCATIVE = ("LOC", "locative")
    ATTENDANT = ("ATD", "attendant")
    ALLATIVE = ("ALL", "allative")
    ABLATIVE = ("ABL", "ablative")
    ORIENTATIVE = ("ORI", "orientative")
    INTERRELATIVE = ("IRL", "interrelative")
    INTRATIVE = ("INV", "intrative")
    NAVIGATIVE = ("NAV", "navigative")

    # Spatio-temporal II
    CONCURSIVE = ("CNR", "concursive")
    ASSESSIVE = ("ASS", "assessive")
    PERIODIC = ("PER", "periodic")
    PROLAPSIVE = ("PRO", "prolapsive")
    PRECURSIVE = ("PCV", "precursive")
    POSTCURSIVE = ("PCR", "postcursive")
    ELAPSIVE = ("ELP", "elapsive")
    PROLIMITIVE = ("PLM", "prolimitive")

    @classmethod
    def by_vowel(cls, vowel: str) -> Optional["Case"]:
        """
        Case spelled by a Vc vowel.

        Series 1-4 hold nine cases each. Series 5-8 hold eight: their form 5
        spells nothing, and the forms above it shift down by one.

        Example:
            >>> Case.by_vowel("o'o")
            <Case.UTILITATIVE: UTL>
        """
        series, form = series_and_form(vowel)
        if series == -1:
            return None
        if series <= 4:
            index = 9 * (series - 1) + form - 1
        elif form == 5:
            return None
        else:
            index = 36 + 8 * (series - 5) + (form - 1 if form < 5 else form - 2)
        return list(cls)[index]


class Illocution(Category):
    ASSERTIVE = ("ASR", "assertive", True)
    PERFORMATIVE = ("PFM", "performative")


class Expectation(Category):
    COGNITIVE = ("COG", "cognitive", True)
    RESPONSIVE = ("RSP", "responsive")
    EXECUTIVE = ("EXE", "executive")


class Validation(Category):
    OBSERVATIONAL = ("OBS", "observational")
    RECOLLECTIVE = ("REC", "recollective")
    PURPORTIVE = ("PUP", "purportive")
    REPORTIVE = ("RPR", "reportive")
    IMAGINARY = ("IMA", "imaginary")
    CONVENTIONAL = ("CVN", "conventional")
    INTUITIVE = ("ITU", "intuitive")
    INFERENTIAL = ("INF", "inferential")


# ============================================================================
# Personal Reference
# ============================================================================

class Referent(Category):
    MONADIC_SPEAKER = ("1m", "monadic speaker")
    MONADIC_ADDRESSEE = ("2m", "monadic addressee")
    POLYADIC_ADDRESSEE = ("2p", "polyadic addressee")
    MONADIC_ANIMATE_THIRD_PARTY = ("ma", "monadic animate third party")
    POLYADIC_ANIMATE_THIRD_PARTY = ("pa", "polyadic animate third party")
    MONADIC_INANIMATE_THIRD_PARTY = ("mi", "monadic inanimate third party")
    POLYADIC_INANIMATE_THIRD_PARTY = ("pi", "polyadic inanimate third party")
    MIXED_THIRD_PARTY = ("Mx", "mixed animate/inanimate third party")
    OBVIATIVE = ("Obv", "obviative")
    PROVISIONAL = ("PVS", "provisional")


class Effect(Category):
    NEUTRAL = ("NEU", "neutral", True)
    BENEFICIAL = ("BEN", "beneficial")
    DETRIMENTAL = ("DET", "detrimental")


# ============================================================================
# Bias
# ============================================================================

class Bias(Category):
    """Speaker attitude, spelled by a bare consonant cluster."""

    def __init__(self, abbreviation: str, full_name: str, group: str):
        super().__init__(abbreviation, full_name)
        self.group = group

    ACCIDENTAL = ("ACC", "accidental", "lf")
    ADMISSIVE = ("ADM", "admissive", "lļ")
    ANTICIPATIVE = ("ANP", "anticipative", "lst")
    APOLOGETIC = ("APB", "apologetic", "řs")
    APPREHENSIVE = ("APH", "apprehensive", "vvz")
    ARBITRARY = ("ARB", "arbitrary", "xtļ")
    ARCHETYPAL = ("ACH", "archetypal", "mçt")
    ATTENTIVE = ("ATE", "attentive", "ňj")
    COMEDIC = ("CMD", "comedic", "pļļ")
    CONTEMPLATIVE = ("CTV", "contemplative", "gvv")
    CONTEMPTIVE = ("CTP", "contemptive", "kšš")
    CONTENSIVE = ("CNV", "contensive", "rrj")
    CORRECTIVE = ("CRR", "corrective", "ňţ")
    CORRUPTIVE = ("CRP", "corruptive", "gžž")
    COINCIDENTAL = ("COI", "coincidental", "ššč")
    DEJECTIVE = ("DEJ", "dejective", "žžg")
    DELECTATIVE = ("DLC", "delectative", "ẓmm")
    DERISIVE = ("DRS", "derisive", "pfc")
    DESPERATIVE = ("DES", "desperative", "mřř")
    DIFFIDENT = ("DFD", "diffident", "cč")
    DISAPPROBATIVE = ("DPB", "disapprobative", "ffx")
    DISCONCERTIVE = ("DCC", "disconcertive", "gzj")
    DISMISSIVE = ("DIS", "dismissive", "kff")
    DOLOROUS = ("DOL", "dolorous", "řřx")
    DUBITATIVE = ("DUB", "dubitative", "mmf")
    EUPHEMISTIC = ("EUP", "euphemistic", "vvt")
    EUPHORIC = ("EUH", "euphoric", "gzz")
    EXASPERATIVE = ("EXA", "exasperative", "kçç")
    EXIGENT = ("EXG", "exigent", "rrs")
    FASCINATIVE = ("FSC", "fascinative", "žžj")
    FORTUITOUS = ("FOR", "fortuitous", "lzp")
    GRATIFICATIVE = ("GRT", "gratificative", "mmh")
    IMPLICATIVE = ("IPL", "implicative", "vll")
    IMPATIENT = ("IPT", "impatient", "žžv")
    INDIGNATIVE = ("IDG", "indignative", "pšš")
    INFATUATIVE = ("IFT", "infatuative", "vvr")
    INSIPID = ("ISP", "insipid", "lçp")
    INVIDIOUS = ("IVD", "invidious", "řřn")
    IRONIC = ("IRO", "ironic", "mmž")
    MANDATORY = ("MAN", "mandatory", "msk")
    OPTIMAL = ("OPT", "optimal", "ççk")
    PERPLEXIVE = ("PPX", "perplexive", "llh")
    PESSIMISTIC = ("PES", "pessimistic", "ksp")
    PROPITIOUS = ("PPT", "propitious", "mll")
    PROPOSITIVE = ("PPV", "propositive", "sl")
    PROSAIC = ("PSC", "prosaic", "žžt")
    PRESUMPTIVE = ("PSM", "presumptive", "nnţ")
    RACIST = ("RAC", "racist", "kčč")
    REFLECTIVE = ("RFL", "reflective", "llm")
    REPULSIVE = ("RPU", "repulsive", "šštļ")
    RESIGNATIVE = ("RSG", "resignative", "mščt")
    REVELATIVE = ("RVL", "revelative", "mmļ")
    SATIATIVE = ("SAT", "satiative", "ļţ")
    SKEPTICAL = ("SKP", "skeptical", "rnž")
    SOLICITATIVE = ("SOL", "solicitative", "ňňs")
    STUPEFACTIVE = ("STU", "stupefactive", "ļļč")
    SUGGESTIVE = ("SGS", "suggestive", "ltç")
    TREPIDATIVE = ("TRP", "trepidative", "llč")
    VEXATIVE = ("VEX", "vexative", "ksk")

    @classmethod
    def by_group(cls, group: str) -> Optional["Bias"]:
        """Bias spelled by a consonant cluster, or None."""
        for member in cls:
            if member.group == group:
                return member
        return None
