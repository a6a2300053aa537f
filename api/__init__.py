# api - REST surface for beam_design
