"""
 Estimate base classes.

 This is a collection of classes used to describe the parts of an estimate:
 a drone, a solar panel, a grow light, a container full of racks...
 Every parameter is checked for appropriate units when it is assigned.
"""

from scalar.scalar import _scalar, one
from scalar.units import M, KG, SEC, K, Pa, W, J, L, DAY, HR, kWh, mol
from scalar.finance import EUR

################################################################################
class ESError(Exception):
    """ Error handler to setting attributes """

#===============================================================================
class ParamKeyError(ESError, AttributeError):
    """ Error handler to setting attributes """
    def __init__(self, key, name):
        ESError.__init__(self, key, name)
        self.key = key
        self.name = name

    def __str__(self):
        return "Parameter '" + self.key + "' does not exist in '" + self.name + "'"

#===============================================================================
class MessageError(ESError):
    """ Error handler for wrong units """
    def __init__(self, message):
        ESError.__init__(self, message)
        self.msg = message

    def __str__(self):
        return self.msg

################################################################################
class ESUnitCheck(object):
    """
    A class used to make sure that appropriate units are assigned to variables
    """
#===============================================================================
    def __init__(self, unit, name):
        """
        Inputs:
            unit - A unit (ex: M**2)
            name - The name associated with the unit (ex: 'Area')
        """
        self.unit = unit
        self.name = name

#===============================================================================
    def CheckUnit(self, key, value, owner):
        """
        Checks that the unit is consistent with self.unit

        Inputs
            key   - The name of the variable checked
            value - The variable assigned to key
            owner - The name of the object who own the variable key
        """
        #
        # A value of None will never have a unit and is a valid asignment
        #
        if value is None:
            return
        #
        # This is the case of a list of scalars
        #
        if isinstance(value, (list, tuple)):
            for val in value:
                self._TryUnit(key, val, owner)
            return

        #
        # unit is a single scalar
        #
        self._TryUnit(key, value, owner)

#===============================================================================
    def _TryUnit(self, key, value, owner):
        """
        Test that the unit of value is consistent with self.unit

        Inputs
            key   - The name of the variable checked
            value - The variable assigned to key
            owner - The name of the object who own the variable key
        """
        message = "'" + key + "' in '" + owner + "' must be in units of " + self.name

        #
        # Plain numbers are dimensionless
        #
        if not isinstance(value, _scalar):
            try:
                value = value * one
            except TypeError:
                raise MessageError(message)
            if not isinstance(value, _scalar):
                raise MessageError(message)

        #
        # Zero carries units just like any other value: 0 m is not 0 kg
        #
        if not self.unit.convertible(value.unit):
            raise MessageError(message)

#===============================================================================
#
# A collection of unit types
#
#===============================================================================
Unitless           = ESUnitCheck(one           , 'Unitless')
Time               = ESUnitCheck(SEC           , 'Time')
Length             = ESUnitCheck(M             , 'Length')
Area               = ESUnitCheck(M**2          , 'Area')
Volume             = ESUnitCheck(M**3          , 'Volume')
Mass               = ESUnitCheck(KG            , 'Mass')
Force              = ESUnitCheck(KG*M/SEC**2   , 'Force')
Power              = ESUnitCheck(W             , 'Power')
Energy             = ESUnitCheck(J             , 'Energy')
Velocity           = ESUnitCheck(M/SEC         , 'Velocity')
Density            = ESUnitCheck(KG/M**3       , 'Density')
Pressure           = ESUnitCheck(Pa            , 'Pressure')
Temperature        = ESUnitCheck(K             , 'Temperature')
Irradiance         = ESUnitCheck(W/M**2        , 'Power/Area')
SpecificHeat       = ESUnitCheck(J/(KG*K)      , 'Specific Heat (Energy/(Mass*Temperature))')
SpecificEnergy     = ESUnitCheck(kWh/KG        , 'Energy/Mass')
MolarMass          = ESUnitCheck(KG/mol        , 'Molar Mass (Mass/Amount)')
VolumeRate         = ESUnitCheck(L/DAY         , 'Volume/Time')
DutyCycle          = ESUnitCheck(HR/DAY        , 'Time/Time')
Money              = ESUnitCheck(EUR           , 'Currency (EUR)')
PricePerMass       = ESUnitCheck(EUR/KG        , 'Price/Mass (EUR/Mass)')
PricePerEnergy     = ESUnitCheck(EUR/kWh       , 'Price/Energy (EUR/Energy)')

################################################################################
class ESBase(object):
    """
    A base class for all classes with parameters

    Attributes:
        NoneList - A dictionary of attributes that have been set to None
        UnitList - A dictionary of units associated with attributes
    """

#===============================================================================
    def __init__(self):

        self.__dict__['name'] = self.__class__.__name__

        #
        # A dictionary of values that have been set to None
        # This is used to implement a calculation instead
        # of a simple get for a variable
        #
        self.__dict__['NoneList'] = {}

        #
        # A dictionary of all the unit associated with a variable
        #
        self.__dict__['UnitList'] = {}

#===============================================================================
    def __setattr__(self, key, value):
        """
        Overload the '.' on all objects such that new
        attributes cannot accidentally be created. Thus only
        attributes created in __init__ will ever be available
        in the class.
        """
        #
        # Make sure no new variables are created besides those set in __init__
        #
        if key not in self.__dict__ and key not in self.NoneList:
            raise ParamKeyError(key, self.__dict__['name'])

        #
        # Make sure that the proper units have been assigned
        #
        if key in self.UnitList:
            self.UnitList[key].CheckUnit(key, value, self.__class__.__name__)

        self.__dict__[key] = value

        #
        # If the value is set to None, pull it out of __dict__ and put it in NoneList
        # so that __getattr__ gets called when the variable is asked for
        #
        if value is None:
            self.NoneList[key] = None
            del self.__dict__[key]
        elif key in self.NoneList:
            del self.NoneList[key]

#===============================================================================
    def __getattr__(self, key):
        """
        Limit the access to only what exists in the __dict__ dictionary
        """
        NoneList = self.__dict__.get('NoneList')
        if NoneList is None:
            raise AttributeError(key)

        #
        # If the value was set to None, it got taken out of the __dict__ and
        # put in NoneList. It is calculated with _Calc<key> when the class
        # knows how, and is None otherwise.
        #
        if key in NoneList:
            Calc = getattr(self.__class__, '_Calc' + key, None)
            if Calc is not None:
                return Calc(self)
            return None

        #
        # The key is not in the None list or __dict__
        #
        raise ParamKeyError(key, self.__dict__['name'])

#===============================================================================
    def __delattr__(self, key):
        #
        # Cannot delete anything from the dictionary
        #
        message = "Cannot del '" + key + "' from " + self.__class__.__name__
        raise MessageError(message)

#===============================================================================
    def copy(self):
        """
        Copies the instance. Parameters are shared, the None and unit lists are not.
        """
        Copy = self.__class__.__new__(self.__class__)

        Copy.__dict__.update(self.__dict__)
        Copy.__dict__['NoneList'] = dict(self.NoneList)
        Copy.__dict__['UnitList'] = dict(self.UnitList)

        return Copy

#===============================================================================
    def _CheckPositive(self, *keys):
        """
        Verifies that the listed parameters are larger than zero

        Inputs:
            keys - The names of the parameters checked
        """
        for key in keys:
            value = getattr(self, key)
            if value is None:
                raise MessageError("'" + key + "' in '" + self.name + "' must be specified")
            if not value > 0:
                raise MessageError("'" + key + "' in '" + self.name + "' must be larger than zero")
