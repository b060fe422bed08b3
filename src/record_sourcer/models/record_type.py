"""Record type and subtype enumerations."""

from enum import Enum


class RecordType(str, Enum):
    """Kind of genealogical event or document a record describes."""

    UNCLASSIFIED = "Unclassified"

    # Birth and christening
    BIRTH = "Birth"
    BIRTH_REGISTRATION = "BirthRegistration"
    BAPTISM = "Baptism"
    BIRTH_OR_BAPTISM = "BirthOrBaptism"

    # Death and burial
    DEATH = "Death"
    DEATH_REGISTRATION = "DeathRegistration"
    BURIAL = "Burial"
    CREMATION = "Cremation"
    OBITUARY = "Obituary"
    PROBATE = "Probate"
    WILL = "Will"
    MEMORIAL = "Memorial"

    # Marriage
    MARRIAGE = "Marriage"
    MARRIAGE_REGISTRATION = "MarriageRegistration"
    DIVORCE = "Divorce"

    # Residence
    CENSUS = "Census"
    POPULATION_REGISTER = "PopulationRegister"
    ELECTORAL_REGISTER = "ElectoralRegister"
    DIRECTORY = "Directory"
    RESIDENCE = "Residence"
    VALUATION_ROLL = "ValuationRoll"

    # Movement
    IMMIGRATION = "Immigration"
    EMIGRATION = "Emigration"
    PASSENGER_LIST = "PassengerList"
    NATURALIZATION = "Naturalization"
    CONVICT_TRANSPORTATION = "ConvictTransportation"
    PASSPORT_APPLICATION = "PassportApplication"

    # Government and work
    SOCIAL_SECURITY = "SocialSecurity"
    EMPLOYMENT = "Employment"
    MILITARY = "Military"
    PENSION = "Pension"
    CRIMINAL_REGISTER = "CriminalRegister"
    COURT = "Court"
    TAX = "Tax"
    LAND_TAX = "LandTax"
    LAND_GRANT = "LandGrant"
    PATENT = "Patent"
    FREEDOM_OF_CITY = "FreedomOfCity"
    APPRENTICESHIP = "Apprenticeship"
    SCHOOL_RECORDS = "SchoolRecords"
    WORKHOUSE = "Workhouse"
    MEDICAL = "Medical"
    LUNATIC_ASYLUM = "LunaticAsylum"

    # Church and family history
    OTHER_CHURCH_EVENT = "OtherChurchEvent"
    CONFIRMATION = "Confirmation"
    FAM_HIST_OR_PEDIGREE = "FamHistOrPedigree"
    FAMILY_TREE = "FamilyTree"
    NEWSPAPER = "Newspaper"
    BOOK = "Book"
    ACADEMIC = "Academic"
    SLAVE_SCHEDULE = "SlaveSchedule"
    CERTIFICATE = "Certificate"
    PHOTOGRAPH = "Photograph"
    DNA = "DNA"
    ENCYCLOPEDIA = "Encyclopedia"

    @property
    def ref_title(self) -> str:
        """Human readable title used as the meaningful name of a citation."""
        return REF_TITLES.get(self, "")


class RecordSubtype(str, Enum):
    """Refinement of a record type where a site distinguishes one."""

    MEMBER_REGISTRATION = "MemberRegistration"
    BANNS = "Banns"
    MARRIAGE_LICENSE = "MarriageLicense"
    MARRIAGE_OR_BANNS = "MarriageOrBanns"
    PROBATE_GRANT = "ProbateGrant"


class SourceType(str, Enum):
    """Whether the page is a primary record or a compiled profile."""

    RECORD = "record"
    PROFILE = "profile"


REF_TITLES: dict[RecordType, str] = {
    RecordType.UNCLASSIFIED: "",
    RecordType.BIRTH: "Birth",
    RecordType.BIRTH_REGISTRATION: "Birth Registration",
    RecordType.BAPTISM: "Baptism",
    RecordType.BIRTH_OR_BAPTISM: "Birth or Baptism",
    RecordType.DEATH: "Death",
    RecordType.DEATH_REGISTRATION: "Death Registration",
    RecordType.BURIAL: "Burial",
    RecordType.CREMATION: "Cremation",
    RecordType.OBITUARY: "Obituary",
    RecordType.PROBATE: "Probate",
    RecordType.WILL: "Will",
    RecordType.MEMORIAL: "Memorial",
    RecordType.MARRIAGE: "Marriage",
    RecordType.MARRIAGE_REGISTRATION: "Marriage Registration",
    RecordType.DIVORCE: "Divorce",
    RecordType.CENSUS: "Census",
    RecordType.POPULATION_REGISTER: "Population Register",
    RecordType.ELECTORAL_REGISTER: "Electoral Register",
    RecordType.DIRECTORY: "Directory",
    RecordType.RESIDENCE: "Residence",
    RecordType.VALUATION_ROLL: "Valuation Roll",
    RecordType.IMMIGRATION: "Immigration",
    RecordType.EMIGRATION: "Emigration",
    RecordType.PASSENGER_LIST: "Passenger List",
    RecordType.NATURALIZATION: "Naturalization",
    RecordType.CONVICT_TRANSPORTATION: "Convict Transportation",
    RecordType.PASSPORT_APPLICATION: "Passport Application",
    RecordType.SOCIAL_SECURITY: "Social Security",
    RecordType.EMPLOYMENT: "Employment",
    RecordType.MILITARY: "Military",
    RecordType.PENSION: "Pension",
    RecordType.CRIMINAL_REGISTER: "Criminal Register",
    RecordType.COURT: "Court",
    RecordType.TAX: "Tax",
    RecordType.LAND_TAX: "Land Tax",
    RecordType.LAND_GRANT: "Land Grant",
    RecordType.PATENT: "Patent",
    RecordType.FREEDOM_OF_CITY: "Freedom of City",
    RecordType.APPRENTICESHIP: "Apprenticeship",
    RecordType.SCHOOL_RECORDS: "School Records",
    RecordType.WORKHOUSE: "Workhouse",
    RecordType.MEDICAL: "Medical",
    RecordType.LUNATIC_ASYLUM: "Lunatic Asylum",
    RecordType.OTHER_CHURCH_EVENT: "Church Event",
    RecordType.CONFIRMATION: "Confirmation",
    RecordType.FAM_HIST_OR_PEDIGREE: "Family History",
    RecordType.FAMILY_TREE: "Family Tree",
    RecordType.NEWSPAPER: "Newspaper",
    RecordType.BOOK: "Book",
    RecordType.ACADEMIC: "Academic",
    RecordType.SLAVE_SCHEDULE: "Slave Schedule",
    RecordType.CERTIFICATE: "Certificate",
    RecordType.PHOTOGRAPH: "Photograph",
    RecordType.DNA: "DNA",
    RecordType.ENCYCLOPEDIA: "Encyclopedia",
}

SUBTYPE_REF_TITLES: dict[RecordSubtype, str] = {
    RecordSubtype.MEMBER_REGISTRATION: "Church Membership",
    RecordSubtype.BANNS: "Marriage Banns",
    RecordSubtype.MARRIAGE_LICENSE: "Marriage License",
    RecordSubtype.MARRIAGE_OR_BANNS: "Marriage or Banns",
    RecordSubtype.PROBATE_GRANT: "Probate Grant",
}
