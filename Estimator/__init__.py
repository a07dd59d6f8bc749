"""
Engineering estimates built on the scalar quantity package: atmosphere,
quad-copter flights, hydrogen storage, solar panels and microgreens grown
in a shipping container.
"""
